"""String resources service.

Author: Michael Economou
Date: 2026-10-18

StringResources implements the Resources port over a key -> template table
(config.STRINGS by default). Templates are formatted with str.format.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from colorpick.config import STRINGS


class StringResources:
    """Resources port backed by an in-memory string table."""

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings = dict(STRINGS if strings is None else strings)

    def get_string(self, key: str, *args: Any) -> str:
        """Return the template for `key` formatted with `args`.

        Raises:
            KeyError: if `key` is not in the table

        """
        try:
            template = self._strings[key]
        except KeyError:
            raise KeyError(f"Unknown string resource: {key}") from None
        return template.format(*args) if args else template
