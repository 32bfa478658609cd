"""
Tests for menupro.csv_repository - CSV load/save, repair and legacy migration.
"""

from __future__ import annotations

import csv

import pytest

from menupro.csv_repository import ACCESS_COLUMNS, CLIENT_COLUMNS, CsvRepository, _write_atomic, access_from_row
from menupro.models import AccessEntry, AccessType, Client


@pytest.fixture
def repo(tmp_path) -> CsvRepository:
    return CsvRepository(tmp_path)


def _write_csv(path, header, rows):
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(header)
        w.writerows(rows)


class TestLoad:
    def test_empty_dir_creates_default_client(self, repo):
        clients, accesses = repo.load()
        assert [c.name for c in clients] == ["No Client"]
        assert accesses == []
        assert repo.clients_path.exists()

    def test_round_trip(self, repo):
        acme = Client(name="Acme")
        entries = [
            AccessEntry(client_id=acme.id, kind=AccessType.RDP, alias="dc01", host="10.0.0.5", port=3390,
                        user="bob", domain="CORP", rdp_ignore_cert=False, rdp_full_screen=True,
                        rdp_dynamic_resolution=False, rdp_width=1280, rdp_height=720, notes="line1\nline2"),
            AccessEntry(client_id=acme.id, kind=AccessType.URL, alias="portal", url="https://acme.example"),
        ]
        repo.save_all([acme], entries)

        clients, accesses = repo.load()
        assert [(c.id, c.name) for c in clients] == [(acme.id, "Acme")]
        by_alias = {a.alias: a for a in accesses}
        assert by_alias["dc01"] == entries[0]
        assert by_alias["portal"].port is None
        assert by_alias["portal"].kind is AccessType.URL

    def test_orphan_accesses_go_to_first_client(self, repo):
        c = Client(name="Only")
        repo.save_all([c], [AccessEntry(client_id="gone", alias="x", url="https://x")])
        _, accesses = repo.load()
        assert accesses[0].client_id == c.id

    def test_blank_client_name_is_repaired(self, repo):
        _write_csv(repo.clients_path, ["id", "name"], [["abc", "  "]])
        clients, _ = repo.load()
        assert clients[0].id == "abc"
        assert clients[0].name == "No Client"

    def test_garbled_cells_get_defaults(self, repo):
        c = Client(name="C")
        repo.save_clients([c])
        _write_csv(
            repo.accesses_path,
            ["id", "client_id", "kind", "alias", "host", "port", "rdp_ignore_cert", "rdp_width", "extra"],
            [["a1", c.id, "telnet", "weird", "h", "abc", "maybe", "12.0", "ignored"]],
        )
        _, accesses = repo.load()
        a = accesses[0]
        assert a.kind is AccessType.URL
        assert a.port is None
        assert a.rdp_ignore_cert is True
        assert a.rdp_width == 12

    @pytest.mark.parametrize("cell", ["inf", "-inf", "1e400", "nan"])
    def test_out_of_range_numbers_become_none(self, repo, cell):
        c = Client(name="C")
        repo.save_clients([c])
        _write_csv(
            repo.accesses_path,
            ["id", "client_id", "kind", "alias", "host", "port", "rdp_width", "rdp_height"],
            [["a1", c.id, "RDP", "big", "h", cell, cell, "768"]],
        )
        _, accesses = repo.load()
        a = accesses[0]
        assert a.port is None
        assert a.rdp_width is None
        assert a.rdp_height == 768

    def test_large_integer_kept_exact(self):
        assert access_from_row({"port": "12345678901234567890"}).port == 12345678901234567890

    def test_missing_columns_use_model_defaults(self):
        e = access_from_row({"kind": "rdp", "host": "h"})
        assert e.kind is AccessType.RDP
        assert e.rdp_dynamic_resolution is True
        assert e.rdp_full_screen is False
        assert e.id


class TestSave:
    def test_sorted_by_kind_then_alias(self, repo):
        entries = [
            AccessEntry(kind=AccessType.URL, alias="b"),
            AccessEntry(kind=AccessType.SSH, alias="z"),
            AccessEntry(kind=AccessType.URL, alias="A"),
            AccessEntry(kind=AccessType.RDP, alias="m"),
        ]
        repo.save_accesses(entries)
        with open(repo.accesses_path, encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))
        assert [(r["kind"], r["alias"]) for r in rows] == [("RDP", "m"), ("SSH", "z"), ("URL", "A"), ("URL", "b")]
        assert list(rows[0].keys()) == ACCESS_COLUMNS

    def test_atomic_write_leaves_no_temp_file(self, repo, tmp_path):
        repo.save_clients([Client(name="x")])
        assert not list(tmp_path.glob("*.tmp"))

    def test_failed_write_removes_temp_file_and_keeps_old_data(self, repo, tmp_path):
        repo.save_clients([Client(name="keep")])

        def rows():
            yield {"id": "1", "name": "new"}
            raise RuntimeError("disk gone")

        with pytest.raises(RuntimeError):
            _write_atomic(repo.clients_path, CLIENT_COLUMNS, rows())

        assert not list(tmp_path.glob("*.tmp"))
        assert "keep" in repo.clients_path.read_text(encoding="utf-8")


class TestLegacyMigration:
    HEADER = ["Id", "Client", "Kind", "Alias", "Host", "Port", "User", "Url", "Notes"]

    def test_splits_clients_and_links_accesses(self, repo, tmp_path):
        _write_csv(repo.accesses_path, self.HEADER, [
            ["", "Acme", "SSH", "web", "10.0.0.1", "22", "root", "", ""],
            ["", "acme", "URL", "portal", "", "", "", "https://acme", "n"],
            ["", "Globex", "RDP", "dc", "10.0.0.2", "", "admin", "", ""],
            ["", "", "URL", "misc", "", "", "", "https://misc", ""],
        ])

        clients, accesses = repo.load()

        names = sorted(c.name for c in clients)
        assert names == ["Acme", "Globex", "No Client"]
        ids = {c.name: c.id for c in clients}
        by_alias = {a.alias: a for a in accesses}
        assert by_alias["web"].client_id == ids["Acme"]
        assert by_alias["portal"].client_id == ids["Acme"]
        assert by_alias["dc"].client_id == ids["Globex"]
        assert by_alias["misc"].client_id == ids["No Client"]
        assert by_alias["dc"].port is None
        assert by_alias["web"].port == 22

        backups = list(tmp_path.glob("accesses_legacy_backup_*.csv"))
        assert len(backups) == 1
        assert "Client" in backups[0].read_text(encoding="utf-8").splitlines()[0]

    def test_current_format_is_not_migrated(self, repo, tmp_path):
        repo.save_accesses([AccessEntry(client_id="x", alias="a", url="https://a")])
        assert repo.looks_legacy() is False
        assert repo.migrate_legacy_single_csv() is False
        assert not list(tmp_path.glob("accesses_legacy_backup_*.csv"))

    def test_no_file_no_migration(self, repo):
        assert repo.migrate_legacy_single_csv() is False
