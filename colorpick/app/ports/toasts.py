"""Toast notification port.

Author: Michael Economou
Date: 2026-10-18
"""

from __future__ import annotations

from typing import Protocol


class Toasts(Protocol):
    """Fire-and-forget transient user-visible messages."""

    def toast(self, message: str) -> None:
        ...
