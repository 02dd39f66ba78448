"""Module: state_value.py.

Author: Michael Economou
Date: 2026-10-18

Observable state cells.

StateValue holds a single value and emits value_changed only when an assigned
value differs from the current one. combine_states() derives a read-only cell
from a snapshot of several cells and recomputes it whenever any of them
changes; map_state() is the single-source case.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from colorpick.utils.events.observable import Observable, Signal

T = TypeVar("T")

__all__ = ["StateValue", "combine_states", "map_state"]


class StateValue(Observable, Generic[T]):
    """Observable holder of a current value.

    Usage:
        progress = StateValue(EMPTY_PROGRESS)
        progress.value_changed.connect(render)
        progress.value = PercentageProgress(10)  # render() called
        progress.value = PercentageProgress(10)  # equal value, nothing emitted
    """

    value_changed = Signal(object)

    def __init__(self, initial: T, *, read_only: bool = False) -> None:
        super().__init__()
        self._value = initial
        self._read_only = read_only

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._read_only:
            raise AttributeError("derived state cannot be assigned")
        self._assign(new_value)

    def _assign(self, new_value: T) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        self.value_changed.emit(new_value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def combine_states(sources: Sequence[StateValue[Any]], transform: Callable[..., Any]) -> StateValue[Any]:
    """Create a read-only cell holding transform(*source values).

    The transform must be pure: it only ever sees a snapshot of the current
    source values and is called again on every source change.
    """
    sources = tuple(sources)

    def _recompute(*_args: Any) -> None:
        derived._assign(transform(*(source.value for source in sources)))

    derived: StateValue[Any] = StateValue(
        transform(*(source.value for source in sources)), read_only=True
    )
    for source in sources:
        source.value_changed.connect(_recompute)
    return derived


def map_state(source: StateValue[Any], transform: Callable[[Any], Any]) -> StateValue[Any]:
    """Create a read-only cell holding transform(source.value)."""
    return combine_states((source,), transform)
