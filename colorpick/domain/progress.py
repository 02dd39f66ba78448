"""Module: progress.py.

Author: Michael Economou
Date: 2026-10-18

Progress state of a long-running operation: either empty (nothing running)
or a percentage in the 0..100 range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class Progress:
    """Base class of progress states. Use EMPTY_PROGRESS or PercentageProgress."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EmptyProgress(Progress):
    """No operation is running."""


@dataclass(frozen=True, slots=True)
class PercentageProgress(Progress):
    """An operation is running and has reached `percentage` percent."""

    percentage: int

    START: ClassVar[PercentageProgress]

    def __post_init__(self) -> None:
        if not 0 <= self.percentage <= 100:
            raise ValueError(f"percentage must be within 0..100, got {self.percentage}")


EMPTY_PROGRESS = EmptyProgress()
PercentageProgress.START = PercentageProgress(0)


def is_in_progress(progress: Progress) -> bool:
    """Return True unless the progress is empty."""
    return not isinstance(progress, EmptyProgress)


def get_percentage(progress: Progress) -> int:
    """Return the percentage, or the start percentage (0) for empty progress."""
    if isinstance(progress, PercentageProgress):
        return progress.percentage
    return PercentageProgress.START.percentage
