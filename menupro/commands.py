#===============================================================================
#  MenuPro | commands.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Builds SSH command strings and xfreerdp argument lists from access entries.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import re
from pathlib import PurePath
from typing import List

from .constants import DEFAULT_RDP_CLIENT
from .models import AccessEntry

_SHELL_SAFE_RE = re.compile(r"^[A-Za-z0-9_@%+=:,./-]+$")


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


def shell_quote(value: str) -> str:
    """Quote a value for interpolation into a `bash -lc` command string.

    Safe tokens are returned as-is. Anything else is wrapped in single quotes
    with each embedded quote turned into '"'"' (close, literal quote, reopen).
    """
    value = str(value)
    if value and _SHELL_SAFE_RE.match(value):
        return value
    return "'" + value.replace("'", "'\"'\"'") + "'"


def looks_like_option(value) -> bool:
    """True when ssh would parse the value as a command-line option."""
    return not is_blank(value) and str(value).strip().startswith("-")


def uses_plus_dialect(client: str) -> bool:
    """xfreerdp3 spells boolean options as +option instead of /option."""
    return PurePath(client).name.endswith("3")


def build_ssh_command(entry: AccessEntry) -> str:
    """`ssh -p <port> [<user>@]<host>` with user and host quoted separately."""
    if is_blank(entry.host):
        raise ValueError("SSH access has no host")
    if looks_like_option(entry.host) or looks_like_option(entry.user):
        raise ValueError("SSH host and user must not start with '-'")
    host = shell_quote(entry.host.strip())
    target = host if is_blank(entry.user) else f"{shell_quote(entry.user.strip())}@{host}"
    return f"ssh -p {entry.effective_port()} {target}"


def build_rdp_args(entry: AccessEntry, client: str = DEFAULT_RDP_CLIENT, *, from_stdin: bool = False) -> List[str]:
    """Argument vector for xfreerdp/xfreerdp3 (without the program name).

    Display modes are exclusive: full screen, then dynamic resolution,
    then an explicit size. No password flag is ever emitted; with
    `from_stdin` the client reads credentials from standard input.
    """
    if is_blank(entry.host):
        raise ValueError("RDP access has no host")

    args = [f"/v:{entry.host.strip()}:{entry.effective_port()}"]

    if not is_blank(entry.user):
        args.append(f"/u:{entry.user.strip()}")

    if not is_blank(entry.domain):
        args.append(f"/d:{entry.domain.strip()}")

    if entry.rdp_ignore_cert:
        args.append("/cert:ignore")

    if entry.rdp_full_screen:
        args.append("/f")
    elif entry.rdp_dynamic_resolution:
        args.append("+dynamic-resolution" if uses_plus_dialect(client) else "/dynamic-resolution")
    elif (entry.rdp_width or 0) > 0 and (entry.rdp_height or 0) > 0:
        args.append(f"/size:{entry.rdp_width}x{entry.rdp_height}")

    if from_stdin:
        # Without this the client opens its own prompt and hangs with no terminal.
        args.append("/from-stdin:force")

    return args


def build_rdp_command(entry: AccessEntry, client: str = DEFAULT_RDP_CLIENT) -> str:
    """Shell command string for running the RDP client inside a terminal."""
    argv = [client] + build_rdp_args(entry, client)
    return " ".join(shell_quote(a) for a in argv)
