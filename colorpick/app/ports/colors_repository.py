"""Colors repository port.

Author: Michael Economou
Date: 2026-10-18
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from colorpick.domain.named_color import NamedColor


class ColorsRepository(Protocol):
    """Source of selectable colors and sink for the chosen one."""

    async def get_available_colors(self) -> list[NamedColor]:
        """Fetch every selectable color."""
        ...

    async def get_by_id(self, color_id: int) -> NamedColor:
        """Resolve a color id. Raises ColorNotFoundError for unknown ids."""
        ...

    async def get_current_color(self) -> NamedColor:
        """Return the color currently in use."""
        ...

    def set_current_color(self, color: NamedColor) -> AsyncIterator[int]:
        """Persist `color` as current.

        The work starts when the returned iterator is first iterated; it
        yields increasing percentages 0..100 and finishes on completion.
        """
        ...
