#===============================================================================
#  MenuPro | catalog.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  In-memory catalog of clients and accesses plus selection. Keeps the main
#  window small and is testable without Qt.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import List, Optional

from .constants import DEFAULT_CLIENT_NAME
from .csv_repository import CsvRepository, access_sort_key
from .models import AccessEntry, Client


class Catalog:
    def __init__(self, repo: CsvRepository):
        self.repo = repo
        self.clients: List[Client] = []
        self.accesses: List[AccessEntry] = []  # for the selected client only
        self._all_accesses: List[AccessEntry] = []
        self.selected_client: Optional[Client] = None
        self.selected_access: Optional[AccessEntry] = None
        self.reload()

    # ----------------------------
    # Loading / selection
    # ----------------------------
    def reload(self, select_client_id: str = "") -> None:
        clients, accesses = self.repo.load()
        self.clients = sorted(clients, key=lambda c: c.name.lower())
        self._all_accesses = accesses
        self.selected_client = self.find_client(select_client_id) or (self.clients[0] if self.clients else None)
        self.refresh_accesses()

    def refresh_accesses(self) -> None:
        if self.selected_client is None:
            source = self._all_accesses
        else:
            source = [a for a in self._all_accesses if a.client_id == self.selected_client.id]
        self.accesses = sorted(source, key=access_sort_key)
        self.selected_access = self.accesses[0] if self.accesses else None

    def select_client(self, client: Optional[Client]) -> None:
        self.selected_client = client
        self.refresh_accesses()

    def find_client(self, client_id: str) -> Optional[Client]:
        return next((c for c in self.clients if c.id == client_id), None) if client_id else None

    def find_access(self, access_id: str) -> Optional[AccessEntry]:
        return next((a for a in self._all_accesses if a.id == access_id), None)

    def save_all(self) -> None:
        self.repo.save_all(self.clients, self._all_accesses)

    # ----------------------------
    # Clients
    # ----------------------------
    def _name_taken(self, name: str, exclude_id: str = "") -> bool:
        return any(c.id != exclude_id and c.name.lower() == name.lower() for c in self.clients)

    def ensure_client(self, name: str) -> Client:
        name = (name or "").strip() or DEFAULT_CLIENT_NAME
        existing = next((c for c in self.clients if c.name.lower() == name.lower()), None)
        if existing:
            return existing
        c = Client(name=name)
        self.clients.append(c)
        self.clients.sort(key=lambda x: x.name.lower())
        return c

    def add_client(self, name: str, notes: str = "") -> Client:
        name = (name or "").strip()
        if not name:
            raise ValueError("Client name is required.")
        if self._name_taken(name):
            raise ValueError(f"A client named '{name}' already exists. Use a unique name.")
        c = Client(name=name, notes=notes)
        self.clients.append(c)
        self.clients.sort(key=lambda x: x.name.lower())
        self.save_all()
        self.select_client(c)
        return c

    def rename_client(self, client: Client, name: str, notes: str = "") -> None:
        name = (name or "").strip()
        if not name:
            raise ValueError("Client name is required.")
        if self._name_taken(name, exclude_id=client.id):
            raise ValueError(f"A client named '{name}' already exists. Use a unique name.")
        client.name = name
        client.notes = notes
        client.touch()
        self.clients.sort(key=lambda x: x.name.lower())
        self.save_all()

    def remove_client(self, client: Client) -> None:
        """Remove a client and every access that belongs to it."""
        self.clients = [c for c in self.clients if c.id != client.id]
        self._all_accesses = [a for a in self._all_accesses if a.client_id != client.id]
        if not self.clients:
            self.clients.append(Client(name=DEFAULT_CLIENT_NAME))
        self.save_all()
        self.select_client(self.clients[0])

    # ----------------------------
    # Accesses
    # ----------------------------
    def add_access(self, entry: AccessEntry) -> AccessEntry:
        if self.selected_client is None:
            raise ValueError("Select a client before creating an access.")
        entry.client_id = self.selected_client.id
        entry.touch()
        self._all_accesses.append(entry)
        self.save_all()
        self.refresh_accesses()
        self.selected_access = entry
        return entry

    def update_access(self, entry: AccessEntry, edited: AccessEntry) -> None:
        """Copy the editable fields of `edited` onto the stored `entry`."""
        for name in (
            "kind", "alias", "host", "port", "user", "domain",
            "rdp_ignore_cert", "rdp_full_screen", "rdp_dynamic_resolution",
            "rdp_width", "rdp_height", "url", "notes",
        ):
            setattr(entry, name, getattr(edited, name))
        entry.touch()
        self.save_all()
        self.refresh_accesses()
        self.selected_access = entry

    def remove_access(self, entry: AccessEntry) -> None:
        self._all_accesses = [a for a in self._all_accesses if a.id != entry.id]
        self.save_all()
        self.refresh_accesses()
