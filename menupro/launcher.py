#===============================================================================
#  MenuPro | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Opens access entries: URL in the browser, SSH and RDP inside a terminal,
#  or RDP directly with a password fed on stdin.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Dict, Iterable, Optional, Tuple

from .commands import build_rdp_args, build_rdp_command, build_ssh_command, is_blank, looks_like_option
from .constants import DEFAULT_RDP_CLIENT, RDP_CLIENT_CANDIDATES, TERMINAL_EMULATORS, URL_OPENER
from .models import AccessEntry, AccessType
from .process_launcher import spawn, spawn_with_input
from .terminal import run_in_terminal
from .tool_locator import find_rdp_client

logger = logging.getLogger(__name__)

Terminals = Iterable[Tuple[str, str]]


def open_url(url: Optional[str]) -> None:
    if is_blank(url):
        logger.info("URL access has no url; nothing to open")
        return
    spawn([URL_OPENER, url.strip()])


def open_ssh(entry: AccessEntry, terminals: Terminals = TERMINAL_EMULATORS) -> None:
    if is_blank(entry.host):
        logger.info("SSH access %r has no host; nothing to open", entry.alias)
        return
    if looks_like_option(entry.host) or looks_like_option(entry.user):
        logger.warning("SSH access %r: host or user starts with '-'; not opening", entry.alias)
        return
    run_in_terminal(build_ssh_command(entry), terminals)


def open_rdp_in_terminal(
    entry: AccessEntry,
    rdp_clients: Iterable[str] = RDP_CLIENT_CANDIDATES,
    terminals: Terminals = TERMINAL_EMULATORS,
) -> None:
    """RDP inside a terminal; the client prompts for the password there."""
    if is_blank(entry.host):
        logger.info("RDP access %r has no host; nothing to open", entry.alias)
        return
    client = find_rdp_client(rdp_clients) or DEFAULT_RDP_CLIENT
    run_in_terminal(build_rdp_command(entry, client), terminals)


def open_access(
    entry: AccessEntry,
    *,
    rdp_clients: Iterable[str] = RDP_CLIENT_CANDIDATES,
    terminals: Terminals = TERMINAL_EMULATORS,
) -> None:
    """Open an access entry according to its kind.

    kinds:
      - URL: xdg-open
      - SSH: ssh in a terminal
      - RDP: xfreerdp in a terminal (never a direct launch from here)
    """
    handlers: Dict[AccessType, Callable[[], None]] = {
        AccessType.URL: lambda: open_url(entry.url),
        AccessType.SSH: lambda: open_ssh(entry, terminals),
        AccessType.RDP: lambda: open_rdp_in_terminal(entry, rdp_clients, terminals),
    }
    try:
        handler = handlers[AccessType(entry.kind)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported access type: {entry.kind!r}") from None
    handler()


def open_rdp_with_password(
    entry: AccessEntry,
    password: str,
    *,
    rdp_clients: Iterable[str] = RDP_CLIENT_CANDIDATES,
) -> Optional[subprocess.Popen]:
    """Run the RDP client directly, passing the password on stdin.

    Requires xfreerdp or xfreerdp3 on PATH; otherwise nothing happens.
    The process handle is returned for callers that want it.
    """
    if entry.kind != AccessType.RDP:
        logger.info("open with password is RDP-only; ignoring %s access", entry.kind)
        return None
    if is_blank(entry.host):
        logger.info("RDP access %r has no host; nothing to open", entry.alias)
        return None

    client = find_rdp_client(rdp_clients)
    if client is None:
        return None

    argv = [client] + build_rdp_args(entry, client, from_stdin=True)
    return spawn_with_input(argv, password)
