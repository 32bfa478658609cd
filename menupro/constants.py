#===============================================================================
#  MenuPro | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for UI sizing, theme, file naming and launch defaults.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QSize

APP_TITLE = "MenuPro"
APP_DIR_NAME = "MenuPro"
DATA_DIR_ENV = "MENUPRO_DATA_DIR"

CLIENTS_FILE_NAME = "clients.csv"
ACCESSES_FILE_NAME = "accesses.csv"
STATE_FILE_NAME = "launcher_state.json"
LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "menupro.log"

DEFAULT_CLIENT_NAME = "No Client"
DEFAULT_ACCESS_ALIAS = "New Access"

DEFAULT_SSH_PORT = 22
DEFAULT_RDP_PORT = 3389

# Probe order matters: first binary found wins.
RDP_CLIENT_CANDIDATES = ("xfreerdp", "xfreerdp3")
DEFAULT_RDP_CLIENT = "xfreerdp"

# (emulator, flag that precedes the command to run)
TERMINAL_EMULATORS = (
    ("x-terminal-emulator", "-e"),
    ("gnome-terminal", "--"),
    ("konsole", "-e"),
    ("xterm", "-e"),
)

URL_OPENER = "xdg-open"

# --- Metro / Windows Phone style theme ---
METRO_BG = "#101010"

ACCESS_TILE_COLORS = {
    "URL": "#0078D7",  # blue
    "SSH": "#107C10",  # green
    "RDP": "#8764B8",  # purple
}

TILE_SMALL = QSize(150, 110)
TILE_WIDE = QSize(300, 110)

ICON_SIZE = QSize(48, 48)
GRID_SIZE = TILE_WIDE
