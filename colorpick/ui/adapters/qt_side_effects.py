"""Qt adapters for the navigation and toast ports.

Author: Michael Economou
Date: 2026-10-18

Both are called from the view model loop thread and only emit bridge
signals; the dialog reacts on the GUI thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from colorpick.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from colorpick.ui.adapters.qt_view_model_bridge import ViewModelBridge

logger = get_cached_logger(__name__)


class QtNavigatorAdapter:
    """Navigator port: going back closes the hosting dialog."""

    def __init__(self, bridge: ViewModelBridge) -> None:
        self._bridge = bridge

    def go_back(self, result: Any = None) -> None:
        logger.debug("[QtNavigatorAdapter] go_back(%r)", result, extra={"dev_only": True})
        self._bridge.navigate_back_requested.emit(result)


class QtToastsAdapter:
    """Toasts port: shown as a transient label in the hosting dialog."""

    def __init__(self, bridge: ViewModelBridge) -> None:
        self._bridge = bridge

    def toast(self, message: str) -> None:
        self._bridge.toast_requested.emit(message)
