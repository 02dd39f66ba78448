"""Dialogs."""

from colorpick.ui.dialogs.change_color_dialog import ChangeColorDialog

__all__ = ["ChangeColorDialog"]
