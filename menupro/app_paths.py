#===============================================================================
#  MenuPro | app_paths.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Where the catalog, state file and logs live.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import (
    ACCESSES_FILE_NAME,
    APP_DIR_NAME,
    CLIENTS_FILE_NAME,
    DATA_DIR_ENV,
    LOG_DIR_NAME,
    STATE_FILE_NAME,
)


def data_dir(override: Optional[Path] = None) -> Path:
    """Resolution order: explicit override, $MENUPRO_DATA_DIR, platform data dir."""
    if override is not None:
        d = Path(override)
    elif os.environ.get(DATA_DIR_ENV, "").strip():
        d = Path(os.environ[DATA_DIR_ENV]).expanduser()
    else:
        d = Path(platformdirs.user_data_dir(APP_DIR_NAME, appauthor=False))
    d.mkdir(parents=True, exist_ok=True)
    return d


def clients_path(base: Path) -> Path:
    return base / CLIENTS_FILE_NAME


def accesses_path(base: Path) -> Path:
    return base / ACCESSES_FILE_NAME


def state_path(base: Path) -> Path:
    return base / STATE_FILE_NAME


def log_dir(base: Path) -> Path:
    d = base / LOG_DIR_NAME
    d.mkdir(parents=True, exist_ok=True)
    return d
