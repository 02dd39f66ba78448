"""Module: colorpick.config.app

Author: Michael Economou
Date: 2026-10-18

Application-level configuration: app info, logging settings, storage.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "colorpick"
APP_VERSION = "1.0"
APP_AUTHOR = "Michael Economou"

# Environment variable overriding the per-platform user data directory
DATA_DIR_ENV_VAR = "COLORPICK_DATA_DIR"

# Persisted screen state file (inside the user data directory)
STATE_FILE_NAME = "state.json"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# File logging
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
