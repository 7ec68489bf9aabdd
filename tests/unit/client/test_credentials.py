"""Tests for the credential stores."""

import json
import os
import stat
import sys

import pytest

from newsdesk.client.credentials import FileCredentialStore, InMemoryCredentialStore


class TestInMemoryCredentialStore:
    def test_empty_by_default(self):
        assert InMemoryCredentialStore().get() is None

    def test_set_get_clear(self):
        store = InMemoryCredentialStore()

        store.set({"access": "a", "refresh": "r"})
        assert store.get() == {"access": "a", "refresh": "r"}

        store.clear()
        assert store.get() is None

    def test_get_returns_a_copy(self):
        store = InMemoryCredentialStore({"access": "a", "refresh": "r"})

        store.get()["access"] = "mutated"

        assert store.get()["access"] == "a"


class TestFileCredentialStore:
    def test_missing_file_means_no_credentials(self, tmp_path):
        assert FileCredentialStore(str(tmp_path / "creds.json")).get() is None

    def test_round_trip_through_disk(self, tmp_path):
        path = tmp_path / "nested" / "creds.json"
        FileCredentialStore(str(path)).set({"access": "a", "refresh": "r"})

        assert json.loads(path.read_text()) == {"access": "a", "refresh": "r"}
        assert FileCredentialStore(str(path)).get() == {"access": "a", "refresh": "r"}

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_private(self, tmp_path):
        path = tmp_path / "creds.json"
        FileCredentialStore(str(path)).set({"access": "a", "refresh": "r"})

        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_clear_removes_file(self, tmp_path):
        path = tmp_path / "creds.json"
        store = FileCredentialStore(str(path))
        store.set({"access": "a", "refresh": "r"})

        store.clear()
        store.clear()

        assert not path.exists()
        assert store.get() is None

    def test_corrupt_file_is_ignored(self, tmp_path):
        path = tmp_path / "creds.json"
        path.write_text("{not json")

        assert FileCredentialStore(str(path)).get() is None
