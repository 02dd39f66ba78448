"""Module: paths.py.

Author: Michael Economou
Date: 2026-10-18

Centralized path management for the colorpick application.

Platform-specific behavior:
- Windows: %LOCALAPPDATA%/colorpick/
- Linux: $XDG_DATA_HOME/colorpick/ or ~/.local/share/colorpick/
- macOS: ~/Library/Application Support/colorpick/

COLORPICK_DATA_DIR overrides the directory on every platform.

Directory Structure:
    <user_data_dir>/
    ├── state.json     # Persisted screen state
    └── logs/          # Log files
"""

import os
import platform
from pathlib import Path

from colorpick.config import APP_NAME, DATA_DIR_ENV_VAR, STATE_FILE_NAME
from colorpick.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class AppPaths:
    """Static accessors for application paths, created lazily on first access."""

    _user_data_dir: Path | None = None

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        override = os.environ.get(DATA_DIR_ENV_VAR)
        if override:
            return Path(override)

        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = str(Path(os.environ.get("USERPROFILE", "")) / "AppData" / "Local")
            return Path(base) / APP_NAME

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data) / APP_NAME
        return Path.home() / ".local" / "share" / APP_NAME

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get the user data directory, creating it if necessary."""
        if cls._user_data_dir is None:
            cls._user_data_dir = cls._get_platform_data_dir()
            logger.info("[AppPaths] User data directory: %s", cls._user_data_dir)

        cls._user_data_dir.mkdir(parents=True, exist_ok=True)
        return cls._user_data_dir

    @classmethod
    def get_state_path(cls) -> Path:
        """Get path to the persisted screen state file."""
        return cls.get_user_data_dir() / STATE_FILE_NAME

    @classmethod
    def get_logs_dir(cls) -> Path:
        """Get path to logs directory."""
        logs_dir = cls.get_user_data_dir() / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir

    @classmethod
    def reset(cls) -> None:
        """Forget the cached directory (tests switch the override between runs)."""
        cls._user_data_dir = None
