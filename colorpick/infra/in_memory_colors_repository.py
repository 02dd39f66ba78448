"""Module: in_memory_colors_repository.py.

Author: Michael Economou
Date: 2026-10-18

InMemoryColorsRepository - ColorsRepository over a fixed palette.

Simulates the latency of a real backend: listing and lookups sleep for a
configurable delay and saving reports progress in steps of 2% before the new
current color is published through current_color_changed.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Sequence

from colorpick.domain.named_color import ColorNotFoundError, NamedColor
from colorpick.utils.events import Observable, Signal
from colorpick.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

AVAILABLE_COLORS: tuple[NamedColor, ...] = (
    NamedColor(1, "Red", 0xFFFF0000),
    NamedColor(2, "Green", 0xFF00FF00),
    NamedColor(3, "Blue", 0xFF0000FF),
    NamedColor(4, "Yellow", 0xFFFFFF00),
    NamedColor(5, "Magenta", 0xFFFF00FF),
    NamedColor(6, "Cyan", 0xFF00FFFF),
    NamedColor(7, "Gray", 0xFF888888),
    NamedColor(8, "Navy", 0xFF000080),
    NamedColor(9, "Pink", 0xFFFFC0CB),
    NamedColor(10, "Sky Blue", 0xFF87CEEB),
    NamedColor(11, "Violet", 0xFFEE82EE),
    NamedColor(12, "Olive", 0xFF808000),
    NamedColor(13, "Black", 0xFF000000),
    NamedColor(14, "White", 0xFFFFFFFF),
)


class InMemoryColorsRepository(Observable):
    """In-memory colors repository with simulated delays.

    Signals:
    - current_color_changed: Emitted after a save completes (args: NamedColor)
    """

    current_color_changed = Signal(object)

    def __init__(
        self,
        colors: Sequence[NamedColor] = AVAILABLE_COLORS,
        *,
        load_delay: float = 1.0,
        lookup_delay: float = 0.1,
        progress_step_delay: float = 0.03,
        progress_step: int = 2,
    ) -> None:
        super().__init__()
        if not colors:
            raise ValueError("repository needs at least one color")
        if not 0 < progress_step <= 100:
            raise ValueError(f"progress_step must be within 1..100, got {progress_step}")

        self._colors = tuple(colors)
        self._current_color = self._colors[0]
        self._load_delay = load_delay
        self._lookup_delay = lookup_delay
        self._progress_step_delay = progress_step_delay
        self._progress_step = progress_step
        self.persist_count = 0

    async def get_available_colors(self) -> list[NamedColor]:
        await asyncio.sleep(self._load_delay)
        return list(self._colors)

    async def get_by_id(self, color_id: int) -> NamedColor:
        await asyncio.sleep(self._lookup_delay)
        return self._find(color_id)

    async def get_current_color(self) -> NamedColor:
        return self._current_color

    async def set_current_color(self, color: NamedColor) -> AsyncIterator[int]:
        self.persist_count += 1
        self._find(color.id)
        logger.info("[InMemoryColorsRepository] Saving current color: %s", color.name)

        percentages = [*range(0, 100, self._progress_step), 100]
        for percentage in percentages:
            await asyncio.sleep(self._progress_step_delay)
            yield percentage

        if self._current_color != color:
            self._current_color = color
            self.current_color_changed.emit(color)

    def _find(self, color_id: int) -> NamedColor:
        for color in self._colors:
            if color.id == color_id:
                return color
        raise ColorNotFoundError(color_id)
