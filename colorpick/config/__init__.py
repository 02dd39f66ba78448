"""Module: colorpick.config

Author: Michael Economou
Date: 2026-10-18

Configuration package for the colorpick application.

This package organizes configuration into logical modules:
- app: Application info, logging settings
- ui: Dialog sizes, save progress timings, string table

All settings are re-exported from this module:
    from colorpick.config import APP_NAME, STRINGS
"""

from colorpick.config.app import *  # noqa: F401, F403
from colorpick.config.ui import *  # noqa: F401, F403
