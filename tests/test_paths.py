"""Tests for colorpick.utils.paths module."""

import os
from pathlib import Path

import pytest

from colorpick.utils.paths import AppPaths


class TestAppPaths:
    """Test suite for AppPaths class."""

    def setup_method(self):
        """Reset AppPaths before each test."""
        AppPaths.reset()

    def teardown_method(self):
        """Reset AppPaths after each test."""
        AppPaths.reset()

    def test_override_directory_is_used_and_created(self, tmp_path, monkeypatch):
        target = tmp_path / "data"
        monkeypatch.setenv("COLORPICK_DATA_DIR", str(target))

        result = AppPaths.get_user_data_dir()

        assert result == target
        assert result.is_dir()

    @pytest.mark.skipif(os.name == "nt", reason="XDG layout applies to Unix only")
    def test_xdg_data_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("COLORPICK_DATA_DIR", raising=False)
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        monkeypatch.setattr("platform.system", lambda: "Linux")

        result = AppPaths.get_user_data_dir()

        assert result == tmp_path / "colorpick"
        assert result.exists()

    def test_get_state_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("COLORPICK_DATA_DIR", str(tmp_path))

        result = AppPaths.get_state_path()

        assert isinstance(result, Path)
        assert result == tmp_path / "state.json"

    def test_get_logs_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("COLORPICK_DATA_DIR", str(tmp_path))

        result = AppPaths.get_logs_dir()

        assert result.name == "logs"
        assert result.is_dir()

    def test_reset_picks_up_new_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("COLORPICK_DATA_DIR", str(tmp_path / "first"))
        first = AppPaths.get_user_data_dir()

        monkeypatch.setenv("COLORPICK_DATA_DIR", str(tmp_path / "second"))
        assert AppPaths.get_user_data_dir() == first

        AppPaths.reset()
        assert AppPaths.get_user_data_dir() == tmp_path / "second"
