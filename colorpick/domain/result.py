"""Module: result.py.

Author: Michael Economou
Date: 2026-10-18

Result - three-state wrapper over an asynchronous fetch.

Exactly one of PendingResult, SuccessResult(data) or ErrorResult(error) is
active at a time. map() transforms the payload of a success and passes the
other two states through.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Result(Generic[T]):
    """Base class of the loadable states."""

    def map(self, mapper: Callable[[T], R]) -> Result[R]:
        raise NotImplementedError

    @property
    def is_finished(self) -> bool:
        return not isinstance(self, PendingResult)


@dataclass(frozen=True)
class PendingResult(Result[T]):
    """The fetch has not finished yet."""

    def map(self, mapper: Callable[[T], R]) -> Result[R]:
        return PendingResult()


@dataclass(frozen=True)
class SuccessResult(Result[T]):
    """The fetch finished with `data`."""

    data: T

    def map(self, mapper: Callable[[T], R]) -> Result[R]:
        return SuccessResult(mapper(self.data))


@dataclass(frozen=True)
class ErrorResult(Result[T]):
    """The fetch failed with `error`."""

    error: BaseException

    def map(self, mapper: Callable[[T], R]) -> Result[R]:
        return ErrorResult(self.error)
