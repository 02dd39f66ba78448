"""
Module: test_saved_state.py

Author: Michael Economou
Date: 2026-10-18

Tests for SavedStateStore persistence.
"""

import json

from colorpick.app.state import SavedStateStore


class TestInMemoryStore:
    """Without a path values live in memory only."""

    def test_default_used_when_key_missing(self):
        store = SavedStateStore()
        state = store.get_state("current_color_id", 3)
        assert state.value == 3
        assert store.get("current_color_id") == 3

    def test_same_cell_for_same_key(self):
        store = SavedStateStore()
        assert store.get_state("key", 1) is store.get_state("key", 2)

    def test_set_updates_handed_out_cell(self):
        store = SavedStateStore()
        state = store.get_state("key", 1)
        received = []
        state.value_changed.connect(received.append)

        store.set("key", 5)

        assert state.value == 5
        assert received == [5]


class TestPersistentStore:
    """Values survive a new store over the same file."""

    def test_value_survives_restart(self, tmp_path):
        path = tmp_path / "state.json"
        first = SavedStateStore(path)
        first.get_state("current_color_id", 1).value = 7

        second = SavedStateStore(path)

        assert second.get_state("current_color_id", 1).value == 7
        assert json.loads(path.read_text(encoding="utf-8")) == {"current_color_id": 7}

    def test_stored_value_wins_over_default(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"current_color_id": 4}), encoding="utf-8")

        store = SavedStateStore(path)

        assert store.get_state("current_color_id", 1).value == 4

    def test_backup_written_on_second_save(self, tmp_path):
        path = tmp_path / "state.json"
        store = SavedStateStore(path)
        state = store.get_state("current_color_id", 1)
        state.value = 2
        state.value = 3

        assert json.loads(store.backup_path.read_text(encoding="utf-8")) == {
            "current_color_id": 2
        }

    def test_corrupt_file_falls_back_to_backup(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")
        (tmp_path / "state.json.bak").write_text(
            json.dumps({"current_color_id": 9}), encoding="utf-8"
        )

        store = SavedStateStore(path)

        assert store.get("current_color_id") == 9

    def test_corrupt_file_without_backup_is_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        store = SavedStateStore(path)

        assert store.contains("current_color_id") is False
        assert store.get_state("current_color_id", 1).value == 1

    def test_missing_directory_is_created(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "state.json"
        store = SavedStateStore(path)
        store.set("current_color_id", 2)
        assert path.exists()
