"""colorpick - color selection screen with a progress-merging view model."""

from colorpick.config import APP_VERSION

__version__ = APP_VERSION
