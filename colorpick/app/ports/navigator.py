"""Navigation port.

Author: Michael Economou
Date: 2026-10-18
"""

from __future__ import annotations

from typing import Any, Protocol


class Navigator(Protocol):
    """Leaves the current screen, optionally handing a result to the previous one."""

    def go_back(self, result: Any = None) -> None:
        ...
