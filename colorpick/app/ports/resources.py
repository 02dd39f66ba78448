"""String resources port.

Author: Michael Economou
Date: 2026-10-18
"""

from __future__ import annotations

from typing import Any, Protocol


class Resources(Protocol):
    """Pure lookup of user-visible strings."""

    def get_string(self, key: str, *args: Any) -> str:
        ...
