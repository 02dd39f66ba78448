"""Domain types: colors, progress and loadable results."""

from colorpick.domain.named_color import ColorNotFoundError, NamedColor
from colorpick.domain.progress import (
    EMPTY_PROGRESS,
    EmptyProgress,
    PercentageProgress,
    Progress,
    get_percentage,
    is_in_progress,
)
from colorpick.domain.result import ErrorResult, PendingResult, Result, SuccessResult

__all__ = [
    "EMPTY_PROGRESS",
    "ColorNotFoundError",
    "EmptyProgress",
    "ErrorResult",
    "NamedColor",
    "PendingResult",
    "PercentageProgress",
    "Progress",
    "Result",
    "SuccessResult",
    "get_percentage",
    "is_in_progress",
]
