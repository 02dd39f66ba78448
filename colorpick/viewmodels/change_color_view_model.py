"""Module: change_color_view_model.py.

Author: Michael Economou
Date: 2026-10-18

ChangeColorViewModel - screen logic of the color selection dialog.

Four independent input cells are merged into one render-ready ViewState:

    available colors (Result[list[NamedColor]]) ---+
    current color id (persisted int) --------------|--> view_state (Result[ViewState])
    instant save progress (Progress) --------------|          |
    sampled save progress (Progress) --------------+          +--> screen_title (str)

Saving reports progress through one shared stream read by two consumers:
the instant one feeds the progress bar on every tick, the sampled one feeds
the percentage label at most once per sample interval.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from colorpick.config import CURRENT_COLOR_ID_KEY, SAVE_PROGRESS_SAMPLE_INTERVAL_MS
from colorpick.domain.progress import (
    EMPTY_PROGRESS,
    PercentageProgress,
    Progress,
    get_percentage,
    is_in_progress,
)
from colorpick.domain.result import PendingResult, Result, SuccessResult
from colorpick.utils.events import StateValue, combine_states, map_state
from colorpick.utils.flow import FiniteSharedStream, sample
from colorpick.utils.logging.logger_factory import get_cached_logger
from colorpick.viewmodels.base_view_model import BaseViewModel

if TYPE_CHECKING:
    from colorpick.app.ports import ColorsRepository, Navigator, Resources, Toasts
    from colorpick.app.state import SavedStateStore
    from colorpick.domain.named_color import NamedColor

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class NamedColorListItem:
    """A row of the colors list."""

    named_color: NamedColor
    selected: bool


@dataclass(frozen=True)
class ViewState:
    """Everything the dialog needs to render a loaded screen."""

    colors_list: tuple[NamedColorListItem, ...]
    show_save_button: bool
    show_cancel_button: bool
    show_save_progress_bar: bool

    save_progress_percentage: int
    save_progress_percentage_message: str


class ChangeColorViewModel(BaseViewModel):
    """View model of the change color screen.

    Must be created on the thread running the asyncio loop: the constructor
    starts loading the colors list.
    """

    def __init__(
        self,
        current_color_id: int,
        navigator: Navigator,
        toasts: Toasts,
        resources: Resources,
        colors_repository: ColorsRepository,
        saved_state: SavedStateStore,
        *,
        sample_interval: float = SAVE_PROGRESS_SAMPLE_INTERVAL_MS / 1000,
    ) -> None:
        super().__init__()
        self._navigator = navigator
        self._toasts = toasts
        self._resources = resources
        self._colors_repository = colors_repository
        self._sample_interval = sample_interval

        # input sources
        self._available_colors: StateValue[Result[list[NamedColor]]] = StateValue(PendingResult())
        self._current_color_id: StateValue[int] = saved_state.get_state(
            CURRENT_COLOR_ID_KEY, current_color_id
        )
        self._instant_save_progress: StateValue[Progress] = StateValue(EMPTY_PROGRESS)
        self._sampled_save_progress: StateValue[Progress] = StateValue(EMPTY_PROGRESS)

        # main destination
        self.view_state: StateValue[Result[ViewState]] = combine_states(
            (
                self._available_colors,
                self._current_color_id,
                self._instant_save_progress,
                self._sampled_save_progress,
            ),
            self.merge_sources,
        )
        self.screen_title: StateValue[str] = map_state(self.view_state, self._screen_title_for)

        self.load()

    # =====================================
    # Read-only views of the input sources
    # =====================================

    @property
    def current_color_id(self) -> int:
        return self._current_color_id.value

    @property
    def instant_save_progress(self) -> StateValue[Progress]:
        return self._instant_save_progress

    @property
    def sampled_save_progress(self) -> StateValue[Progress]:
        return self._sampled_save_progress

    # =====================================
    # User actions
    # =====================================

    def on_color_chosen(self, named_color: NamedColor) -> None:
        """Select `named_color`. Ignored while a save is running.

        The check reads the sampled progress, not the instant one, so the
        block follows the same indicator the percentage label shows.
        """
        if is_in_progress(self._sampled_save_progress.value):
            logger.debug("[ChangeColorViewModel] Selection ignored while saving: %s", named_color.name)
            return
        self._current_color_id.value = named_color.id

    def on_save_pressed(self) -> asyncio.Task[None]:
        return self.launch(self._save())

    def on_cancel_pressed(self) -> None:
        self._navigator.go_back()

    def try_again(self) -> None:
        self.load()

    def load(self) -> asyncio.Task[None]:
        return self.into(self._available_colors, self._colors_repository.get_available_colors)

    # =====================================
    # Save workflow
    # =====================================

    async def _save(self) -> None:
        try:
            self._instant_save_progress.value = PercentageProgress.START
            self._sampled_save_progress.value = PercentageProgress.START

            current_color = await self._colors_repository.get_by_id(self._current_color_id.value)

            async with FiniteSharedStream(
                self._colors_repository.set_current_color(current_color)
            ) as progress_stream:
                async with asyncio.TaskGroup() as group:
                    group.create_task(
                        self._collect_progress(
                            progress_stream.subscribe(), self._instant_save_progress
                        )
                    )
                    group.create_task(
                        self._collect_progress(
                            sample(progress_stream.subscribe(), self._sample_interval),
                            self._sampled_save_progress,
                        )
                    )

            logger.info("[ChangeColorViewModel] Saved color: %s", current_color.name)
            self._navigator.go_back(current_color)
        except Exception:
            logger.exception("[ChangeColorViewModel] Failed to save the current color")
            self._toasts.toast(self._resources.get_string("error_happened"))
        finally:
            self._instant_save_progress.value = EMPTY_PROGRESS
            self._sampled_save_progress.value = EMPTY_PROGRESS

    @staticmethod
    async def _collect_progress(
        percentages: AsyncIterable[int], destination: StateValue[Progress]
    ) -> None:
        async for percentage in percentages:
            destination.value = PercentageProgress(percentage)

    # =====================================
    # Derivations
    # =====================================

    def merge_sources(
        self,
        colors: Result[list[NamedColor]],
        current_color_id: int,
        instant_save_progress: Progress,
        sampled_save_progress: Progress,
    ) -> Result[ViewState]:
        """Combine the input sources into a Result[ViewState].

        Pure: the output depends on the arguments only. Pending and error
        results pass through unchanged.
        """
        saving = is_in_progress(instant_save_progress)
        percentage_message = self._resources.get_string(
            "percentage_value", get_percentage(sampled_save_progress)
        )

        return colors.map(
            lambda colors_list: ViewState(
                colors_list=tuple(
                    NamedColorListItem(color, color.id == current_color_id)
                    for color in colors_list
                ),
                show_save_button=not saving,
                show_cancel_button=not saving,
                show_save_progress_bar=saving,
                save_progress_percentage=get_percentage(instant_save_progress),
                save_progress_percentage_message=percentage_message,
            )
        )

    def _screen_title_for(self, result: Result[ViewState]) -> str:
        if isinstance(result, SuccessResult):
            current = next((item for item in result.data.colors_list if item.selected), None)
            if current is not None:
                return self._resources.get_string(
                    "change_color_screen_title", current.named_color.name
                )
        return self._resources.get_string("change_color_screen_title_simple")
