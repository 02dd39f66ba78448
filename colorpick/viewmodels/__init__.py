"""View models: Qt-free screen logic built on observable state cells."""

from colorpick.viewmodels.base_view_model import BaseViewModel
from colorpick.viewmodels.change_color_view_model import (
    ChangeColorViewModel,
    NamedColorListItem,
    ViewState,
)

__all__ = ["BaseViewModel", "ChangeColorViewModel", "NamedColorListItem", "ViewState"]
