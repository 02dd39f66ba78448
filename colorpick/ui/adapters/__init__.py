"""Qt adapters bridging view models and ports to Qt."""

from colorpick.ui.adapters.qt_side_effects import QtNavigatorAdapter, QtToastsAdapter
from colorpick.ui.adapters.qt_view_model_bridge import ViewModelBridge

__all__ = ["QtNavigatorAdapter", "QtToastsAdapter", "ViewModelBridge"]
