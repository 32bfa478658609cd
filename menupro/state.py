#===============================================================================
#  MenuPro | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of persistent UI state and launch overrides (launcher_state.json).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .constants import RDP_CLIENT_CANDIDATES, TERMINAL_EMULATORS

logger = logging.getLogger(__name__)


def default_state() -> Dict[str, Any]:
    return {
        "last_client_id": "",   # client selected when the window closed
        "window_size": [1000, 720],
        "tile_sizes": {},       # access id -> "wide" | "small"
        "rdp_clients": list(RDP_CLIENT_CANDIDATES),               # probe order
        "terminals": [list(t) for t in TERMINAL_EMULATORS],       # [emulator, flag]
        "log_level": "INFO",
    }


def load_state(state_path: Path) -> Dict[str, Any]:
    """Load state from disk (or create defaults)."""
    d = default_state()
    if not state_path.exists():
        return d
    try:
        data = json.loads(state_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("state file %s unreadable, using defaults: %s", state_path, e)
        return d
    if not isinstance(data, dict):
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    return data


def save_state(state_path: Path, state: Dict[str, Any]) -> None:
    """Persist state to disk."""
    state_path.write_text(json.dumps(state, indent=2), encoding="utf-8")


def launch_options(state: Dict[str, Any]) -> Dict[str, Any]:
    """Keyword arguments for launcher.open_access from the configured overrides.

    Malformed entries are skipped; an empty result falls back to the defaults.
    """
    clients = [str(c).strip() for c in state.get("rdp_clients") or [] if str(c).strip()]

    terminals = []
    for t in state.get("terminals") or []:
        if isinstance(t, (list, tuple)) and len(t) == 2 and str(t[0]).strip():
            terminals.append((str(t[0]).strip(), str(t[1])))

    return {
        "rdp_clients": tuple(clients) or RDP_CLIENT_CANDIDATES,
        "terminals": tuple(terminals) or TERMINAL_EMULATORS,
    }
