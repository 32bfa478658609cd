#===============================================================================
#  MenuPro | tool_locator.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Finds which of several candidate binaries is available on the host PATH.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Iterable, Optional

from .constants import RDP_CLIENT_CANDIDATES

logger = logging.getLogger(__name__)

PROBE_TIMEOUT_SEC = 10


def is_on_path(name: str) -> bool:
    """Return True if `name` resolves via `command -v` in a login shell.

    A login shell is used so PATH additions from the user's profile count.
    Probe failures (bash missing, timeout, ...) mean "not found".
    """
    if not (name or "").strip():
        return False
    try:
        p = subprocess.run(
            ["bash", "-lc", f"command -v {shlex.quote(name)}"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            text=True,
            timeout=PROBE_TIMEOUT_SEC,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("probe for %s failed: %s", name, e)
        return False
    return bool((p.stdout or "").strip())


def find_first_available(candidates: Iterable[str]) -> Optional[str]:
    """First-match-wins probe over an ordered list of binary names."""
    for name in candidates:
        if is_on_path(name):
            logger.debug("found %s on PATH", name)
            return name
    return None


def find_rdp_client(candidates: Iterable[str] = RDP_CLIENT_CANDIDATES) -> Optional[str]:
    """Return the name of the first installed RDP client, or None.

    The name is returned (not just a flag) because xfreerdp3 takes a
    different flag dialect; see commands.uses_plus_dialect.
    """
    candidates = tuple(candidates)
    client = find_first_available(candidates)
    if client is None:
        logger.info("no RDP client found (tried: %s)", ", ".join(candidates))
    return client
