#===============================================================================
#  MenuPro | menupro/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Main Metro-style UI:
#    - Client list (new / edit / delete)
#    - Access tiles for the selected client (SSH / RDP / URL)
#    - Double-click opens an access; right-click for more actions
#    - RDP "Open with password" runs the client directly, password on stdin
#    - Window size, last client and tile sizes persisted in launcher_state.json
#===============================================================================

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QListWidgetItem,
    QMainWindow,
    QMenu,
    QMessageBox,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from .app_paths import state_path
from .catalog import Catalog
from .constants import APP_TITLE, METRO_BG, TILE_SMALL, TILE_WIDE, URL_OPENER
from .csv_repository import CsvRepository
from .dialogs import AccessDialog, ClientDialog, ask_password
from .launcher import open_access, open_rdp_with_password
from .models import AccessEntry, AccessType, Client
from .process_launcher import spawn
from .state import launch_options, load_state, save_state
from .tile_widget import TileVisual, TileWidget
from .ui_widgets import ClientList, TileList

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, repo: CsvRepository):
        super().__init__()
        self.setWindowTitle(APP_TITLE)

        self.base_dir = repo.base_dir
        self.state_path = state_path(self.base_dir)
        self.state = load_state(self.state_path)
        self.catalog = Catalog(repo)

        self.setStyleSheet(f"""
        QMainWindow {{ background: {METRO_BG}; }}
        QLabel {{ color: white; font-family: "Segoe UI"; }}
        QListWidget {{ background: #161616; color: white; border: 1px solid #2a2a2a; }}
        QPushButton {{
            font-family: "Segoe UI";
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 6px 10px;
        }}
        QPushButton:hover {{ background: #222; }}
        QPushButton:pressed {{ background: #2a2a2a; }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        header = QHBoxLayout()
        header.addWidget(QLabel(f"<b>{APP_TITLE}</b> · clients and their SSH / RDP / URL accesses"))
        header.addStretch(1)

        self.btn_new_access = QPushButton("New access")
        self.btn_new_access.clicked.connect(self.new_access)
        header.addWidget(self.btn_new_access)

        self.btn_open_folder = QPushButton("Open data folder")
        self.btn_open_folder.clicked.connect(self.open_data_folder)
        header.addWidget(self.btn_open_folder)

        self.btn_reload = QPushButton("Reload")
        self.btn_reload.clicked.connect(self.reload)
        header.addWidget(self.btn_reload)

        layout.addLayout(header)

        # Clients column
        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(0, 0, 0, 0)
        left_layout.addWidget(QLabel("<b>Clients</b>"))

        self.client_list = ClientList()
        self.client_list.currentItemChanged.connect(self.on_client_selected)
        left_layout.addWidget(self.client_list)

        client_buttons = QHBoxLayout()
        for text, slot in (("New", self.new_client), ("Edit", self.edit_client), ("Delete", self.delete_client)):
            b = QPushButton(text)
            b.clicked.connect(slot)
            client_buttons.addWidget(b)
        left_layout.addLayout(client_buttons)

        # Accesses column
        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(0, 0, 0, 0)
        self.access_header = QLabel("<b>Accesses</b>")
        right_layout.addWidget(self.access_header)

        self.access_list = TileList()
        self.access_list.itemDoubleClicked.connect(self.open_item)
        self.access_list.setContextMenuPolicy(Qt.CustomContextMenu)
        self.access_list.customContextMenuRequested.connect(self.open_context_menu)
        right_layout.addWidget(self.access_list)

        splitter = QSplitter(Qt.Horizontal)
        splitter.addWidget(left)
        splitter.addWidget(right)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 3)
        layout.addWidget(splitter)

        w, h = (self.state.get("window_size") or [1000, 720])[:2]
        self.resize(int(w), int(h))

        self.reload()

    # ----------------------------
    # Population
    # ----------------------------
    def reload(self):
        try:
            self.catalog.reload(self.state.get("last_client_id", ""))
        except (OSError, ValueError) as e:
            logger.exception("loading catalog failed")
            QMessageBox.critical(self, "Load failed", str(e))
            return
        self.rebuild_clients()

    def rebuild_clients(self):
        self.client_list.blockSignals(True)
        self.client_list.clear()
        current_row = 0
        for i, c in enumerate(self.catalog.clients):
            item = QListWidgetItem(c.name)
            item.setData(Qt.UserRole, c.id)
            self.client_list.addItem(item)
            if self.catalog.selected_client and c.id == self.catalog.selected_client.id:
                current_row = i
        self.client_list.setCurrentRow(current_row)
        self.client_list.blockSignals(False)
        self.rebuild_accesses()

    def rebuild_accesses(self):
        self.access_list.clear()
        client = self.catalog.selected_client
        self.access_header.setText(f"<b>Accesses</b> · {client.name}" if client else "<b>Accesses</b>")

        for entry in self.catalog.accesses:
            size_mode = self.state.get("tile_sizes", {}).get(entry.id, "wide")
            tile_size = TILE_WIDE if size_mode == "wide" else TILE_SMALL

            item = QListWidgetItem()
            item.setData(Qt.UserRole, entry.id)
            item.setSizeHint(tile_size)
            item.setToolTip(entry.notes or entry.summary())
            self.access_list.addItem(item)
            self.access_list.setItemWidget(item, TileWidget(TileVisual.for_access(entry), size=tile_size))

    def on_client_selected(self, current, _previous=None):
        if current is None:
            return
        client = self.catalog.find_client(current.data(Qt.UserRole))
        self.catalog.select_client(client)
        self.state["last_client_id"] = client.id if client else ""
        self.rebuild_accesses()

    def _persist(self, action: str) -> bool:
        """Save launcher_state.json; warns and returns False on error."""
        try:
            save_state(self.state_path, self.state)
        except OSError as e:
            QMessageBox.warning(self, "Save failed", f"{action}: {e}")
            return False
        return True

    # ----------------------------
    # Clients
    # ----------------------------
    def new_client(self):
        dlg = ClientDialog(Client(name="New Client"), self)
        if dlg.exec() != ClientDialog.Accepted:
            return
        try:
            c = self.catalog.add_client(dlg.name, dlg.notes)
        except ValueError as e:
            QMessageBox.warning(self, "Attention", str(e))
            return
        except OSError as e:
            QMessageBox.critical(self, "Save failed", str(e))
            return
        self.state["last_client_id"] = c.id
        self._persist("New client")
        self.rebuild_clients()

    def edit_client(self):
        client = self.catalog.selected_client
        if client is None:
            return
        dlg = ClientDialog(client, self)
        if dlg.exec() != ClientDialog.Accepted:
            return
        try:
            self.catalog.rename_client(client, dlg.name, dlg.notes)
        except ValueError as e:
            QMessageBox.warning(self, "Attention", str(e))
            return
        except OSError as e:
            QMessageBox.critical(self, "Save failed", str(e))
            return
        self.rebuild_clients()

    def delete_client(self):
        client = self.catalog.selected_client
        if client is None:
            return
        res = QMessageBox.question(
            self,
            "Delete client",
            f"Delete client '{client.name}'?\n\nThis also removes ALL accesses of this client.",
            QMessageBox.Yes | QMessageBox.No,
        )
        if res != QMessageBox.Yes:
            return
        try:
            self.catalog.remove_client(client)
        except OSError as e:
            QMessageBox.critical(self, "Remove failed", str(e))
            return
        self.rebuild_clients()

    # ----------------------------
    # Accesses
    # ----------------------------
    def _entry_for_item(self, item: QListWidgetItem):
        return self.catalog.find_access(item.data(Qt.UserRole)) if item else None

    def new_access(self):
        if self.catalog.selected_client is None:
            QMessageBox.information(self, "Attention", "Select a client before creating an access.")
            return
        dlg = AccessDialog(AccessEntry(kind=AccessType.URL, url="https://"), self)
        if dlg.exec() != AccessDialog.Accepted:
            return
        try:
            self.catalog.add_access(dlg.result_entry())
        except (OSError, ValueError) as e:
            QMessageBox.critical(self, "Save failed", str(e))
            return
        self.rebuild_accesses()

    def edit_access(self, entry: AccessEntry):
        dlg = AccessDialog(entry, self)
        if dlg.exec() != AccessDialog.Accepted:
            return
        try:
            self.catalog.update_access(entry, dlg.result_entry())
        except OSError as e:
            QMessageBox.critical(self, "Save failed", str(e))
            return
        self.rebuild_accesses()

    def delete_access(self, entry: AccessEntry):
        res = QMessageBox.question(self, "Delete access", f"Delete access '{entry.alias}'?", QMessageBox.Yes | QMessageBox.No)
        if res != QMessageBox.Yes:
            return
        try:
            self.catalog.remove_access(entry)
        except OSError as e:
            QMessageBox.critical(self, "Remove failed", str(e))
            return
        self.state.get("tile_sizes", {}).pop(entry.id, None)
        self._persist("Delete access")
        self.rebuild_accesses()

    # ----------------------------
    # Launch behavior
    # ----------------------------
    def open_item(self, item: QListWidgetItem):
        entry = self._entry_for_item(item)
        if entry:
            self.open_entry(entry)

    def open_entry(self, entry: AccessEntry):
        try:
            open_access(entry, **launch_options(self.state))
        except Exception as e:
            logger.exception("opening %r failed", entry.alias)
            QMessageBox.critical(self, "Open failed", f"Failed to open:\n{e}")

    def open_entry_with_password(self, entry: AccessEntry):
        password = ask_password(self, entry.alias)
        if password is None:
            return
        opts = launch_options(self.state)
        try:
            p = open_rdp_with_password(entry, password, rdp_clients=opts["rdp_clients"])
        except Exception as e:
            logger.exception("opening %r with password failed", entry.alias)
            QMessageBox.critical(self, "Open failed", f"Failed to open:\n{e}")
            return
        if p is None:
            QMessageBox.information(self, "Open with password", "No RDP client (xfreerdp / xfreerdp3) could be started.")

    # ----------------------------
    # Context menu
    # ----------------------------
    def open_context_menu(self, pos):
        item = self.access_list.itemAt(pos)
        entry = self._entry_for_item(item)
        if not entry:
            return

        size_mode = self.state.get("tile_sizes", {}).get(entry.id, "wide")

        menu = QMenu(self)
        act_open = QAction("Open", self)
        act_open_pw = QAction("Open with password…", self)
        act_copy = QAction("Copy target", self)
        act_toggle_size = QAction("Make Small Tile" if size_mode == "wide" else "Make Wide Tile", self)
        act_edit = QAction("Edit…", self)
        act_remove = QAction("Delete…", self)

        menu.addAction(act_open)
        if entry.kind == AccessType.RDP:
            menu.addAction(act_open_pw)
        menu.addAction(act_copy)
        menu.addSeparator()
        menu.addAction(act_toggle_size)
        menu.addSeparator()
        menu.addAction(act_edit)
        menu.addAction(act_remove)

        chosen = menu.exec(self.access_list.mapToGlobal(pos))
        if not chosen:
            return

        if chosen == act_open:
            self.open_entry(entry)
        elif chosen == act_open_pw:
            self.open_entry_with_password(entry)
        elif chosen == act_copy:
            QApplication.clipboard().setText((entry.url if entry.kind == AccessType.URL else entry.host) or "")
        elif chosen == act_toggle_size:
            self.state.setdefault("tile_sizes", {})[entry.id] = "small" if size_mode == "wide" else "wide"
            self._persist("Tile size")
            self.rebuild_accesses()
        elif chosen == act_edit:
            self.edit_access(entry)
        elif chosen == act_remove:
            self.delete_access(entry)

    # ----------------------------
    # Helpers
    # ----------------------------
    def open_data_folder(self):
        if spawn([URL_OPENER, str(self.base_dir)]) is None:
            QMessageBox.warning(self, "Open failed", f"Could not run {URL_OPENER}.\nData folder: {self.base_dir}")

    def closeEvent(self, event):
        self.state["window_size"] = [self.width(), self.height()]
        self._persist("Window state")
        super().closeEvent(event)
