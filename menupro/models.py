#===============================================================================
#  MenuPro | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models: clients and their access entries (SSH / RDP / URL).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .constants import (
    DEFAULT_ACCESS_ALIAS,
    DEFAULT_CLIENT_NAME,
    DEFAULT_RDP_PORT,
    DEFAULT_SSH_PORT,
)


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def new_id() -> str:
    return uuid.uuid4().hex


class AccessType(str, Enum):
    URL = "URL"
    SSH = "SSH"
    RDP = "RDP"


@dataclass
class Client:
    id: str = field(default_factory=new_id)
    name: str = DEFAULT_CLIENT_NAME
    notes: str = ""
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)

    def touch(self) -> None:
        self.updated_at = utc_now()

    def __str__(self) -> str:
        return self.name


@dataclass
class AccessEntry:
    """One launchable access. Only the fields relevant to `kind` are read."""
    id: str = field(default_factory=new_id)
    client_id: str = ""
    kind: AccessType = AccessType.URL
    alias: str = DEFAULT_ACCESS_ALIAS

    # SSH/RDP
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None

    # RDP
    domain: Optional[str] = None
    rdp_ignore_cert: bool = True          # common on local infra
    rdp_full_screen: bool = False
    rdp_dynamic_resolution: bool = True
    rdp_width: Optional[int] = None
    rdp_height: Optional[int] = None

    # URL
    url: Optional[str] = None

    notes: str = ""
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)

    def touch(self) -> None:
        self.updated_at = utc_now()

    def copy(self) -> "AccessEntry":
        return replace(self)

    def effective_port(self) -> Optional[int]:
        if self.port is not None and self.port > 0:
            return self.port
        if self.kind == AccessType.SSH:
            return DEFAULT_SSH_PORT
        if self.kind == AccessType.RDP:
            return DEFAULT_RDP_PORT
        return None

    def summary(self) -> str:
        """Short target description, e.g. for tile subtitles."""
        if self.kind == AccessType.URL:
            return (self.url or "").strip()
        host = (self.host or "").strip()
        if not host:
            return f"{self.kind.value} • no host"
        user = (self.user or "").strip()
        target = f"{user}@{host}" if user else host
        return f"{self.kind.value} • {target}:{self.effective_port()}"
