from __future__ import annotations

import io
from typing import Any, Dict, List, Optional, Set

import pytest

from menupro import process_launcher, tool_locator
from menupro.models import AccessEntry, AccessType


class _Stdin(io.BytesIO):
    """BytesIO that remembers its contents after close()."""

    def __init__(self):
        super().__init__()
        self.written = b""
        self.was_closed = False

    def close(self):
        if not self.closed:
            self.written = self.getvalue()
            self.was_closed = True
        super().close()


class PopenRecorder:
    """Stands in for subprocess.Popen inside menupro.process_launcher."""

    def __init__(self):
        self.calls: List[List[str]] = []      # every attempted start
        self.started: List["PopenRecorder._Proc"] = []
        self.fail: Set[str] = set()           # program names that raise on start

    class _Proc:
        def __init__(self, argv: List[str], kwargs: Dict[str, Any]):
            self.argv = argv
            self.kwargs = kwargs
            self.pid = 4242
            piped = kwargs.get("stdin") is not None
            self.stdin: Optional[_Stdin] = _Stdin() if piped else None
            self.stdout = io.BytesIO(b"out" * 10) if piped else None
            self.stderr = io.BytesIO(b"err" * 10) if piped else None

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        if argv[0] in self.fail:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        proc = self._Proc(argv, kwargs)
        self.started.append(proc)
        return proc


@pytest.fixture
def fake_popen(monkeypatch) -> PopenRecorder:
    rec = PopenRecorder()
    monkeypatch.setattr(process_launcher.subprocess, "Popen", rec)
    return rec


@pytest.fixture
def binaries_on_path(monkeypatch):
    """Call with the names that should look installed; everything else is absent."""
    present: Set[str] = set()
    probed: List[str] = []

    def fake_is_on_path(name: str) -> bool:
        probed.append(name)
        return name in present

    monkeypatch.setattr(tool_locator, "is_on_path", fake_is_on_path)

    def _set(*names: str) -> List[str]:
        present.clear()
        present.update(names)
        return probed

    _set()
    return _set


@pytest.fixture
def ssh_entry() -> AccessEntry:
    return AccessEntry(kind=AccessType.SSH, alias="web01", host="10.0.0.5", user="admin")


@pytest.fixture
def rdp_entry() -> AccessEntry:
    return AccessEntry(kind=AccessType.RDP, alias="dc01", host="10.0.0.5", port=3390)
