"""Module: colorpick.config.ui

Author: Michael Economou
Date: 2026-10-18

UI configuration: dialog geometry, save progress timings and the string table.
"""

# =====================================
# CHANGE COLOR DIALOG
# =====================================

CHANGE_COLOR_DIALOG_MIN_WIDTH = 360
CHANGE_COLOR_DIALOG_MIN_HEIGHT = 420
COLOR_SWATCH_SIZE = 18

# How long a toast message stays visible (ms)
TOAST_DURATION_MS = 2500

# =====================================
# SAVE PROGRESS
# =====================================

# The percentage label is refreshed at most once per interval while the
# progress bar follows every tick.
SAVE_PROGRESS_SAMPLE_INTERVAL_MS = 200

# Saved-state key of the selected color id
CURRENT_COLOR_ID_KEY = "current_color_id"

# =====================================
# STRINGS
# =====================================

# Templates are formatted with str.format(*args)
STRINGS = {
    "change_color_screen_title": "Change color: {}",
    "change_color_screen_title_simple": "Change color",
    "percentage_value": "{}%",
    "error_happened": "Error happened!",
    "loading": "Loading...",
    "loading_failed": "Failed to load colors",
    "try_again": "Try again",
    "save": "Save",
    "cancel": "Cancel",
}
