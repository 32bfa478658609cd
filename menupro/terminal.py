#===============================================================================
#  MenuPro | terminal.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Runs a shell command inside the first terminal emulator that starts.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .constants import TERMINAL_EMULATORS
from .process_launcher import spawn

logger = logging.getLogger(__name__)


def terminal_argv(emulator: str, flag: str, command: str) -> List[str]:
    return [emulator, flag, "bash", "-lc", command]


def run_in_terminal(command: str, terminals: Iterable[Tuple[str, str]] = TERMINAL_EMULATORS) -> bool:
    """Try each (emulator, flag) in order; stop at the first one that starts.

    Returns False when none could be started.
    """
    for emulator, flag in terminals:
        if spawn(terminal_argv(emulator, flag, command)) is not None:
            logger.info("opened terminal %s", emulator)
            return True
    logger.warning("no terminal emulator could be started")
    return False
