#===============================================================================
#  MenuPro | dialogs.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Edit dialogs for clients and accesses, plus the one-shot password prompt.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QInputDialog,
    QLineEdit,
    QMessageBox,
    QPlainTextEdit,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from .commands import looks_like_option
from .models import AccessEntry, AccessType, Client


def _opt(text: str) -> Optional[str]:
    text = text.strip()
    return text or None


class ClientDialog(QDialog):
    def __init__(self, client: Client, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Client")
        self.setMinimumWidth(360)

        self.name_edit = QLineEdit(client.name)
        self.notes_edit = QPlainTextEdit(client.notes)
        self.notes_edit.setFixedHeight(80)

        form = QFormLayout()
        form.addRow("Name:", self.name_edit)
        form.addRow("Notes:", self.notes_edit)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(buttons)

    def _accept(self):
        if not self.name_edit.text().strip():
            QMessageBox.warning(self, "Client", "Name is required.")
            return
        self.accept()

    @property
    def name(self) -> str:
        return self.name_edit.text().strip()

    @property
    def notes(self) -> str:
        return self.notes_edit.toPlainText().strip()


class AccessDialog(QDialog):
    """Edits a copy of the entry; read the result from `result_entry()`."""

    def __init__(self, entry: AccessEntry, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Access")
        self.setMinimumWidth(420)
        self._entry = entry.copy()

        self.kind_combo = QComboBox()
        for t in AccessType:
            self.kind_combo.addItem(t.value, t)
        self.kind_combo.setCurrentText(AccessType(entry.kind).value)
        self.kind_combo.currentIndexChanged.connect(self._on_kind_changed)

        self.alias_edit = QLineEdit(entry.alias)
        self.host_edit = QLineEdit(entry.host or "")
        self.port_spin = QSpinBox()
        self.port_spin.setRange(0, 65535)
        self.port_spin.setSpecialValueText("default")
        self.port_spin.setValue(entry.port or 0)
        self.user_edit = QLineEdit(entry.user or "")

        self.domain_edit = QLineEdit(entry.domain or "")
        self.ignore_cert_check = QCheckBox("Ignore certificate")
        self.ignore_cert_check.setChecked(entry.rdp_ignore_cert)
        self.full_screen_check = QCheckBox("Full screen")
        self.full_screen_check.setChecked(entry.rdp_full_screen)
        self.dynamic_check = QCheckBox("Dynamic resolution")
        self.dynamic_check.setChecked(entry.rdp_dynamic_resolution)
        self.width_spin = QSpinBox()
        self.width_spin.setRange(0, 16384)
        self.width_spin.setSpecialValueText("auto")
        self.width_spin.setValue(entry.rdp_width or 0)
        self.height_spin = QSpinBox()
        self.height_spin.setRange(0, 16384)
        self.height_spin.setSpecialValueText("auto")
        self.height_spin.setValue(entry.rdp_height or 0)
        self.full_screen_check.toggled.connect(self._update_size_enabled)
        self.dynamic_check.toggled.connect(self._update_size_enabled)

        self.url_edit = QLineEdit(entry.url or "")
        self.notes_edit = QPlainTextEdit(entry.notes)
        self.notes_edit.setFixedHeight(70)

        self.form = QFormLayout()
        self.form.addRow("Type:", self.kind_combo)
        self.form.addRow("Alias:", self.alias_edit)
        self.form.addRow("Host:", self.host_edit)
        self.form.addRow("Port:", self.port_spin)
        self.form.addRow("User:", self.user_edit)
        self.form.addRow("Domain:", self.domain_edit)
        self.form.addRow("", self.ignore_cert_check)
        self.form.addRow("", self.full_screen_check)
        self.form.addRow("", self.dynamic_check)
        self.form.addRow("Width:", self.width_spin)
        self.form.addRow("Height:", self.height_spin)
        self.form.addRow("URL:", self.url_edit)
        self.form.addRow("Notes:", self.notes_edit)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addLayout(self.form)
        layout.addWidget(buttons)

        self._on_kind_changed()

    def _set_row_visible(self, field: QWidget, visible: bool):
        field.setVisible(visible)
        label = self.form.labelForField(field)
        if label is not None:
            label.setVisible(visible)

    def _on_kind_changed(self, _=None):
        kind = self.kind_combo.currentData()
        remote = kind in (AccessType.SSH, AccessType.RDP)
        rdp = kind == AccessType.RDP
        for w in (self.host_edit, self.port_spin, self.user_edit):
            self._set_row_visible(w, remote)
        for w in (self.domain_edit, self.ignore_cert_check, self.full_screen_check,
                  self.dynamic_check, self.width_spin, self.height_spin):
            self._set_row_visible(w, rdp)
        self._set_row_visible(self.url_edit, kind == AccessType.URL)
        self._update_size_enabled()

    def _update_size_enabled(self, _=None):
        explicit = not self.full_screen_check.isChecked() and not self.dynamic_check.isChecked()
        self.width_spin.setEnabled(explicit)
        self.height_spin.setEnabled(explicit)

    def _accept(self):
        kind = self.kind_combo.currentData()
        if not self.alias_edit.text().strip():
            QMessageBox.warning(self, "Access", "Alias is required.")
            return
        if kind in (AccessType.SSH, AccessType.RDP) and not self.host_edit.text().strip():
            QMessageBox.warning(self, "Access", "Host is required for SSH and RDP.")
            return
        dashed = looks_like_option(self.host_edit.text()) or looks_like_option(self.user_edit.text())
        if kind == AccessType.SSH and dashed:
            QMessageBox.warning(self, "Access", "Host and user must not start with '-'.")
            return
        if kind == AccessType.URL and not self.url_edit.text().strip():
            QMessageBox.warning(self, "Access", "URL is required.")
            return
        self.accept()

    def result_entry(self) -> AccessEntry:
        e = self._entry
        e.kind = self.kind_combo.currentData()
        e.alias = self.alias_edit.text().strip()
        e.host = _opt(self.host_edit.text())
        e.port = self.port_spin.value() or None
        e.user = _opt(self.user_edit.text())
        e.domain = _opt(self.domain_edit.text())
        e.rdp_ignore_cert = self.ignore_cert_check.isChecked()
        e.rdp_full_screen = self.full_screen_check.isChecked()
        e.rdp_dynamic_resolution = self.dynamic_check.isChecked()
        e.rdp_width = self.width_spin.value() or None
        e.rdp_height = self.height_spin.value() or None
        e.url = _opt(self.url_edit.text())
        e.notes = self.notes_edit.toPlainText().strip()
        return e


def ask_password(parent, alias: str) -> Optional[str]:
    """Prompt once for an RDP password. None when cancelled. Never stored."""
    text, ok = QInputDialog.getText(parent, "Open with password", f"Password for '{alias}':", QLineEdit.Password)
    return text if ok else None
