#===============================================================================
#  MenuPro | csv_repository.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of clients.csv and accesses.csv, including migration from the
#  older single-file layout (one accesses.csv with a free-text client column).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import csv
import logging
import os
import shutil
from dataclasses import fields
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .app_paths import accesses_path, clients_path, data_dir
from .constants import DEFAULT_CLIENT_NAME
from .models import AccessEntry, AccessType, Client, new_id, utc_now

logger = logging.getLogger(__name__)

CLIENT_COLUMNS = [f.name for f in fields(Client)]
ACCESS_COLUMNS = [f.name for f in fields(AccessEntry)]

_INT_FIELDS = {"port", "rdp_width", "rdp_height"}
_BOOL_FIELDS = {"rdp_ignore_cert", "rdp_full_screen", "rdp_dynamic_resolution"}
_OPTIONAL_TEXT_FIELDS = {"host", "user", "domain", "url"}


def _to_int(raw: str) -> Optional[int]:
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        return None


def _to_bool(raw: str, default: bool) -> bool:
    raw = (raw or "").strip().lower()
    if raw in ("1", "true", "yes", "y", "sim"):
        return True
    if raw in ("0", "false", "no", "n", "nao", "não"):
        return False
    return default


def _to_kind(raw: str) -> AccessType:
    try:
        return AccessType((raw or "").strip().upper())
    except ValueError:
        return AccessType.URL


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return str(value)


def access_from_row(row: Dict[str, str]) -> AccessEntry:
    """Build an AccessEntry from a CSV row; missing/garbled cells get defaults."""
    defaults = AccessEntry()
    kwargs: Dict[str, Any] = {}
    for name in ACCESS_COLUMNS:
        if name not in row or row[name] is None:
            continue
        raw = row[name]
        if name == "kind":
            kwargs[name] = _to_kind(raw)
        elif name in _INT_FIELDS:
            kwargs[name] = _to_int(raw)
        elif name in _BOOL_FIELDS:
            kwargs[name] = _to_bool(raw, getattr(defaults, name))
        elif name in _OPTIONAL_TEXT_FIELDS:
            kwargs[name] = raw if raw.strip() else None
        elif raw.strip() or name in ("notes",):
            kwargs[name] = raw
    return AccessEntry(**kwargs)


def client_from_row(row: Dict[str, str]) -> Client:
    kwargs = {k: row[k] for k in CLIENT_COLUMNS if row.get(k)}
    return Client(**kwargs)


def _read_rows(path: Path) -> List[Dict[str, str]]:
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        rows = []
        for row in reader:
            # header names are matched case-insensitively
            rows.append({(k or "").strip().lower(): (v if v is not None else "") for k, v in row.items()})
        return rows


def _write_atomic(path: Path, columns: List[str], rows: Iterable[Dict[str, str]]) -> None:
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=columns)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


class CsvRepository:
    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = data_dir(base_dir)
        self.clients_path = clients_path(self.base_dir)
        self.accesses_path = accesses_path(self.base_dir)

    # ----------------------------
    # Load
    # ----------------------------
    def load(self) -> Tuple[List[Client], List[AccessEntry]]:
        if not self.clients_path.exists():
            self.migrate_legacy_single_csv()

        clients = [client_from_row(r) for r in _read_rows(self.clients_path)] if self.clients_path.exists() else []
        accesses = [access_from_row(r) for r in _read_rows(self.accesses_path)] if self.accesses_path.exists() else []

        if not clients:
            clients.append(Client(name=DEFAULT_CLIENT_NAME))
            self.save_clients(clients)

        for c in clients:
            if not c.id.strip():
                c.id = new_id()
            if not c.name.strip():
                c.name = DEFAULT_CLIENT_NAME

        known = {c.id for c in clients}
        fallback = clients[0]
        for a in accesses:
            if not a.id.strip():
                a.id = new_id()
            if a.client_id not in known:
                a.client_id = fallback.id

        return clients, accesses

    # ----------------------------
    # Save
    # ----------------------------
    def save_all(self, clients: Iterable[Client], accesses: Iterable[AccessEntry]) -> None:
        self.save_clients(clients)
        self.save_accesses(accesses)

    def save_clients(self, clients: Iterable[Client]) -> None:
        ordered = sorted(clients, key=lambda c: c.name.lower())
        _write_atomic(
            self.clients_path,
            CLIENT_COLUMNS,
            ({k: _cell(getattr(c, k)) for k in CLIENT_COLUMNS} for c in ordered),
        )

    def save_accesses(self, accesses: Iterable[AccessEntry]) -> None:
        ordered = sorted(accesses, key=access_sort_key)
        _write_atomic(
            self.accesses_path,
            ACCESS_COLUMNS,
            ({k: _cell(getattr(a, k)) for k in ACCESS_COLUMNS} for a in ordered),
        )

    # ----------------------------
    # Legacy migration
    # ----------------------------
    def looks_legacy(self) -> bool:
        if not self.accesses_path.exists():
            return False
        with open(self.accesses_path, "r", encoding="utf-8-sig", newline="") as f:
            header = next(csv.reader(f), [])
        cols = {h.strip().lower() for h in header}
        return "client" in cols and "client_id" not in cols

    def migrate_legacy_single_csv(self) -> bool:
        """Split a legacy accesses.csv (client names inline) into clients + accesses.

        Returns True if a migration happened. The legacy file is backed up first.
        """
        if not self.looks_legacy():
            return False

        try:
            legacy = _read_rows(self.accesses_path)
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            logger.warning("legacy accesses file unreadable, leaving it alone: %s", e)
            return False

        by_name: Dict[str, Client] = {}
        for row in legacy:
            name = (row.get("client") or "").strip() or DEFAULT_CLIENT_NAME
            by_name.setdefault(name.lower(), Client(name=name))
        if not by_name:
            by_name[DEFAULT_CLIENT_NAME.lower()] = Client(name=DEFAULT_CLIENT_NAME)
        clients = sorted(by_name.values(), key=lambda c: c.name.lower())

        accesses = []
        for row in legacy:
            entry = access_from_row(row)
            name = (row.get("client") or "").strip() or DEFAULT_CLIENT_NAME
            entry.client_id = by_name.get(name.lower(), clients[0]).id
            if not entry.created_at:
                entry.created_at = utc_now()
            accesses.append(entry)

        stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        backup = self.base_dir / f"accesses_legacy_backup_{stamp}.csv"
        shutil.copy2(self.accesses_path, backup)

        self.save_clients(clients)
        self.save_accesses(accesses)
        logger.info("migrated %d legacy accesses into %d clients (backup: %s)", len(accesses), len(clients), backup)
        return True


def access_sort_key(a: AccessEntry):
    return (AccessType(a.kind).value, a.alias.lower())
