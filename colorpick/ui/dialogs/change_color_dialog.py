"""Module: change_color_dialog.py.

Author: Michael Economou
Date: 2026-10-18

Dialog for choosing the current color.

The dialog is a thin view over ChangeColorViewModel: user actions are posted
to the view model on the AsyncLoopThread, and rendering is driven by the
view state delivered through ViewModelBridge on the GUI thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QColor, QIcon, QPixmap
from PyQt5.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from colorpick.config import (
    CHANGE_COLOR_DIALOG_MIN_HEIGHT,
    CHANGE_COLOR_DIALOG_MIN_WIDTH,
    COLOR_SWATCH_SIZE,
    TOAST_DURATION_MS,
)
from colorpick.domain.result import ErrorResult, SuccessResult
from colorpick.ui.adapters import QtNavigatorAdapter, QtToastsAdapter, ViewModelBridge
from colorpick.utils.logging.logger_factory import get_cached_logger
from colorpick.viewmodels.change_color_view_model import ChangeColorViewModel

if TYPE_CHECKING:
    from colorpick.app.ports import ColorsRepository, Resources
    from colorpick.app.state import SavedStateStore
    from colorpick.domain.named_color import NamedColor
    from colorpick.domain.result import Result
    from colorpick.utils.threading import AsyncLoopThread
    from colorpick.viewmodels.change_color_view_model import ViewState

logger = get_cached_logger(__name__)


class ChangeColorDialog(QDialog):
    """Color selection dialog.

    After exec_() returns Accepted, selected_color holds the saved color.
    """

    PAGE_LOADING = 0
    PAGE_ERROR = 1
    PAGE_CONTENT = 2

    def __init__(
        self,
        loop_thread: AsyncLoopThread,
        colors_repository: ColorsRepository,
        saved_state: SavedStateStore,
        resources: Resources,
        current_color_id: int,
        parent: QWidget | None = None,
        **view_model_options: Any,
    ) -> None:
        super().__init__(parent)
        self._loop_thread = loop_thread
        self._resources = resources
        self._view_state: ViewState | None = None
        self._view_model_cleared = False
        self.selected_color: NamedColor | None = None

        self._setup_ui()

        self._bridge = ViewModelBridge(self)
        self._bridge.view_state_changed.connect(self._render)
        self._bridge.screen_title_changed.connect(self.setWindowTitle)
        self._bridge.navigate_back_requested.connect(self._on_navigate_back)
        self._bridge.toast_requested.connect(self.show_toast)

        navigator = QtNavigatorAdapter(self._bridge)
        toasts = QtToastsAdapter(self._bridge)

        def _create_view_model() -> ChangeColorViewModel:
            view_model = ChangeColorViewModel(
                current_color_id,
                navigator,
                toasts,
                resources,
                colors_repository,
                saved_state,
                **view_model_options,
            )
            self._bridge.attach(view_model)
            return view_model

        self._view_model: ChangeColorViewModel = loop_thread.run_sync(_create_view_model)

    @property
    def view_model(self) -> ChangeColorViewModel:
        return self._view_model

    def _setup_ui(self) -> None:
        """Setup dialog UI."""
        self.setMinimumWidth(CHANGE_COLOR_DIALOG_MIN_WIDTH)
        self.setMinimumHeight(CHANGE_COLOR_DIALOG_MIN_HEIGHT)

        layout = QVBoxLayout(self)

        self.pages = QStackedWidget()
        layout.addWidget(self.pages)

        # Loading page
        self.loading_label = QLabel(self._resources.get_string("loading"))
        self.loading_label.setAlignment(Qt.AlignCenter)
        self.pages.addWidget(self.loading_label)

        # Error page
        error_page = QWidget()
        error_layout = QVBoxLayout(error_page)
        error_layout.addStretch()
        self.error_label = QLabel(self._resources.get_string("loading_failed"))
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        error_layout.addWidget(self.error_label)
        self.try_again_button = QPushButton(self._resources.get_string("try_again"))
        self.try_again_button.clicked.connect(self._on_try_again_clicked)
        error_layout.addWidget(self.try_again_button, alignment=Qt.AlignCenter)
        error_layout.addStretch()
        self.pages.addWidget(error_page)

        # Content page
        content_page = QWidget()
        content_layout = QVBoxLayout(content_page)
        content_layout.setContentsMargins(0, 0, 0, 0)

        self.colors_list = QListWidget()
        self.colors_list.itemClicked.connect(self._on_item_clicked)
        content_layout.addWidget(self.colors_list)

        progress_layout = QHBoxLayout()
        self.save_progress_bar = QProgressBar()
        self.save_progress_bar.setRange(0, 100)
        self.save_progress_bar.setTextVisible(False)
        progress_layout.addWidget(self.save_progress_bar)
        self.save_percentage_label = QLabel()
        progress_layout.addWidget(self.save_percentage_label)
        content_layout.addLayout(progress_layout)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.save_button = QPushButton(self._resources.get_string("save"))
        self.save_button.clicked.connect(self._on_save_clicked)
        button_layout.addWidget(self.save_button)
        self.cancel_button = QPushButton(self._resources.get_string("cancel"))
        self.cancel_button.clicked.connect(self._on_cancel_clicked)
        button_layout.addWidget(self.cancel_button)
        content_layout.addLayout(button_layout)

        self.pages.addWidget(content_page)

        # Toast
        self.toast_label = QLabel()
        self.toast_label.setAlignment(Qt.AlignCenter)
        self.toast_label.hide()
        layout.addWidget(self.toast_label)

        self._toast_timer = QTimer(self)
        self._toast_timer.setSingleShot(True)
        self._toast_timer.timeout.connect(self.toast_label.hide)

        self.pages.setCurrentIndex(self.PAGE_LOADING)

    # =====================================
    # Rendering
    # =====================================

    def _render(self, result: Result[ViewState]) -> None:
        if isinstance(result, SuccessResult):
            self._render_view_state(result.data)
            self.pages.setCurrentIndex(self.PAGE_CONTENT)
        elif isinstance(result, ErrorResult):
            self._view_state = None
            self.pages.setCurrentIndex(self.PAGE_ERROR)
        else:
            self._view_state = None
            self.pages.setCurrentIndex(self.PAGE_LOADING)

    def _render_view_state(self, view_state: ViewState) -> None:
        previous = self._view_state
        self._view_state = view_state

        if previous is None or previous.colors_list != view_state.colors_list:
            self._populate_colors_list(view_state)

        self.save_button.setVisible(view_state.show_save_button)
        self.cancel_button.setVisible(view_state.show_cancel_button)
        self.save_progress_bar.setVisible(view_state.show_save_progress_bar)
        self.save_percentage_label.setVisible(view_state.show_save_progress_bar)
        self.save_progress_bar.setValue(view_state.save_progress_percentage)
        self.save_percentage_label.setText(view_state.save_progress_percentage_message)

    def _populate_colors_list(self, view_state: ViewState) -> None:
        self.colors_list.clear()
        for row, list_item in enumerate(view_state.colors_list):
            color = list_item.named_color
            item = QListWidgetItem(self._swatch_icon(color.value), color.name)
            item.setData(Qt.UserRole, row)
            item.setCheckState(Qt.Checked if list_item.selected else Qt.Unchecked)
            # Check state mirrors the view model; clicks go through _on_item_clicked
            item.setFlags(item.flags() & ~Qt.ItemIsUserCheckable)
            self.colors_list.addItem(item)

    @staticmethod
    def _swatch_icon(argb: int) -> QIcon:
        pixmap = QPixmap(COLOR_SWATCH_SIZE, COLOR_SWATCH_SIZE)
        pixmap.fill(QColor.fromRgba(argb))
        return QIcon(pixmap)

    def show_toast(self, message: str) -> None:
        self.toast_label.setText(message)
        self.toast_label.show()
        self._toast_timer.start(TOAST_DURATION_MS)

    # =====================================
    # User actions (posted to the view model loop)
    # =====================================

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        if self._view_state is None:
            return
        row = item.data(Qt.UserRole)
        self._loop_thread.call(
            self._view_model.on_color_chosen, self._view_state.colors_list[row].named_color
        )

    def _on_save_clicked(self) -> None:
        self._loop_thread.call(self._view_model.on_save_pressed)

    def _on_cancel_clicked(self) -> None:
        self._loop_thread.call(self._view_model.on_cancel_pressed)

    def _on_try_again_clicked(self) -> None:
        self._loop_thread.call(self._view_model.try_again)

    def _on_navigate_back(self, result: object) -> None:
        if result is not None:
            self.selected_color = result  # type: ignore[assignment]
            self.accept()
        else:
            self.reject()

    # =====================================
    # Teardown
    # =====================================

    def done(self, result_code: int) -> None:
        self._clear_view_model()
        super().done(result_code)

    def _clear_view_model(self) -> None:
        if self._view_model_cleared:
            return
        self._view_model_cleared = True
        if self._loop_thread.is_running:
            self._loop_thread.call(self._detach_and_clear)

    def _detach_and_clear(self) -> None:
        # Runs on the loop thread
        self._bridge.detach(self._view_model)
        self._view_model.on_cleared()
