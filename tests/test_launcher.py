"""
Tests for menupro.launcher - dispatch by access type and the password path.
Process starts go through a recording fake; nothing external is launched.
"""

from __future__ import annotations

import shlex

import pytest

from menupro.launcher import open_access, open_rdp_with_password
from menupro.models import AccessEntry, AccessType


def _terminal_command(call):
    # [emulator, flag, "bash", "-lc", command]
    assert call[2:4] == ["bash", "-lc"]
    return call[4]


class TestUrl:
    def test_opens_with_xdg_open(self, fake_popen):
        open_access(AccessEntry(kind=AccessType.URL, url=" https://example.com "))
        assert fake_popen.calls == [["xdg-open", "https://example.com"]]

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_blank_url_is_noop(self, fake_popen, url):
        open_access(AccessEntry(kind=AccessType.URL, url=url))
        assert fake_popen.calls == []

    def test_missing_opener_does_not_raise(self, fake_popen):
        fake_popen.fail = {"xdg-open"}
        open_access(AccessEntry(kind=AccessType.URL, url="https://example.com"))
        assert fake_popen.started == []

    def test_ignores_host_fields(self, fake_popen):
        open_access(AccessEntry(kind=AccessType.URL, url="https://a", host="10.0.0.5", user="root"))
        assert fake_popen.calls == [["xdg-open", "https://a"]]


class TestSsh:
    def test_runs_ssh_in_terminal(self, fake_popen, ssh_entry):
        open_access(ssh_entry)
        assert len(fake_popen.started) == 1
        call = fake_popen.calls[0]
        assert call[:2] == ["x-terminal-emulator", "-e"]
        assert _terminal_command(call) == "ssh -p 22 admin@10.0.0.5"

    def test_blank_host_is_noop(self, fake_popen):
        open_access(AccessEntry(kind=AccessType.SSH, host="", user="admin"))
        assert fake_popen.calls == []

    def test_no_terminal_is_silent(self, fake_popen, ssh_entry):
        fake_popen.fail = {"x-terminal-emulator", "gnome-terminal", "konsole", "xterm"}
        open_access(ssh_entry)
        assert fake_popen.started == []

    def test_option_like_host_is_not_opened(self, fake_popen):
        open_access(AccessEntry(kind=AccessType.SSH, host="-oProxyCommand=id", user="admin"))
        assert fake_popen.calls == []

    def test_custom_terminals(self, fake_popen, ssh_entry):
        open_access(ssh_entry, terminals=[("kitty", "-e")])
        assert fake_popen.calls[0][:2] == ["kitty", "-e"]


class TestRdpInTerminal:
    def test_default_client_when_none_found(self, fake_popen, binaries_on_path, rdp_entry):
        binaries_on_path()
        open_access(rdp_entry)
        call = fake_popen.calls[0]
        assert call[0] == "x-terminal-emulator"
        assert shlex.split(_terminal_command(call)) == [
            "xfreerdp", "/v:10.0.0.5:3390", "/cert:ignore", "/dynamic-resolution",
        ]

    def test_xfreerdp3_uses_plus_flags(self, fake_popen, binaries_on_path, rdp_entry):
        binaries_on_path("xfreerdp3")
        open_access(rdp_entry)
        tokens = shlex.split(_terminal_command(fake_popen.calls[0]))
        assert tokens[0] == "xfreerdp3"
        assert "+dynamic-resolution" in tokens

    def test_never_launches_client_directly(self, fake_popen, binaries_on_path, rdp_entry):
        binaries_on_path("xfreerdp")
        open_access(rdp_entry)
        assert all(c[0] not in ("xfreerdp", "xfreerdp3") for c in fake_popen.calls)
        assert "from-stdin" not in _terminal_command(fake_popen.calls[0])

    def test_blank_host_is_noop(self, fake_popen, binaries_on_path):
        binaries_on_path("xfreerdp")
        open_access(AccessEntry(kind=AccessType.RDP, host="  "))
        assert fake_popen.calls == []

    def test_custom_client_order(self, fake_popen, binaries_on_path, rdp_entry):
        binaries_on_path("xfreerdp", "xfreerdp3")
        open_access(rdp_entry, rdp_clients=["xfreerdp3", "xfreerdp"])
        assert _terminal_command(fake_popen.calls[0]).startswith("xfreerdp3 ")


class TestRdpWithPassword:
    def test_direct_launch_with_password_on_stdin(self, fake_popen, binaries_on_path):
        binaries_on_path("xfreerdp")
        entry = AccessEntry(kind=AccessType.RDP, host="dc01", user="bob", domain="CORP", rdp_full_screen=True)

        p = open_rdp_with_password(entry, "s3cret")

        assert p is fake_popen.started[0]
        assert p.argv == ["xfreerdp", "/v:dc01:3389", "/u:bob", "/d:CORP", "/cert:ignore", "/f", "/from-stdin:force"]
        assert p.stdin.written == b"s3cret\n"
        assert p.stdin.was_closed
        assert not any("s3cret" in a for a in p.argv)

    def test_no_client_is_noop(self, fake_popen, binaries_on_path, rdp_entry):
        binaries_on_path()
        assert open_rdp_with_password(rdp_entry, "pw") is None
        assert fake_popen.calls == []

    def test_blank_host_is_noop(self, fake_popen, binaries_on_path):
        probed = binaries_on_path("xfreerdp")
        assert open_rdp_with_password(AccessEntry(kind=AccessType.RDP, host=None), "pw") is None
        assert fake_popen.calls == []
        assert probed == []

    def test_non_rdp_is_ignored(self, fake_popen, binaries_on_path, ssh_entry):
        binaries_on_path("xfreerdp")
        assert open_rdp_with_password(ssh_entry, "pw") is None
        assert fake_popen.calls == []

    def test_start_failure_is_noop(self, fake_popen, binaries_on_path, rdp_entry):
        binaries_on_path("xfreerdp")
        fake_popen.fail = {"xfreerdp"}
        assert open_rdp_with_password(rdp_entry, "pw") is None


def test_unknown_kind_is_a_programming_error(fake_popen):
    with pytest.raises(ValueError):
        open_access(AccessEntry(kind="FTP", host="h"))
    assert fake_popen.calls == []
