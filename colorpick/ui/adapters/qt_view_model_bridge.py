"""Qt bridge for view model events.

Author: Michael Economou
Date: 2026-10-18

View models emit plain Observable signals on the asyncio loop thread.
ViewModelBridge lives on the GUI thread; re-emitting through its pyqtSignals
queues delivery onto the GUI thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt5.QtCore import QObject, pyqtSignal

if TYPE_CHECKING:
    from colorpick.viewmodels.change_color_view_model import ChangeColorViewModel


class ViewModelBridge(QObject):
    """Thread hop from the view model loop to the GUI thread."""

    view_state_changed = pyqtSignal(object)
    screen_title_changed = pyqtSignal(str)
    navigate_back_requested = pyqtSignal(object)
    toast_requested = pyqtSignal(str)

    def attach(self, view_model: ChangeColorViewModel) -> None:
        """Forward the view model outputs, starting with their current values.

        Must run on the loop thread so no change slips in between reading the
        current values and connecting.
        """
        view_model.view_state.value_changed.connect(self._forward_view_state)
        view_model.screen_title.value_changed.connect(self._forward_screen_title)
        self.view_state_changed.emit(view_model.view_state.value)
        self.screen_title_changed.emit(view_model.screen_title.value)

    def detach(self, view_model: ChangeColorViewModel) -> None:
        view_model.view_state.value_changed.disconnect(self._forward_view_state)
        view_model.screen_title.value_changed.disconnect(self._forward_screen_title)

    def _forward_view_state(self, view_state: object) -> None:
        self.view_state_changed.emit(view_state)

    def _forward_screen_title(self, title: str) -> None:
        self.screen_title_changed.emit(title)
