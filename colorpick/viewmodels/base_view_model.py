"""Module: base_view_model.py.

Author: Michael Economou
Date: 2026-10-18

BaseViewModel - owner of the asyncio tasks started by a screen.

Every coroutine a view model starts goes through launch(), so on_cleared()
can cancel all of them when the screen is torn down. View models must be
created and used on the thread running their event loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, TypeVar

from colorpick.domain.result import ErrorResult, PendingResult, Result, SuccessResult
from colorpick.utils.events import Observable, StateValue
from colorpick.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

T = TypeVar("T")


class BaseViewModel(Observable):
    """Base class for screen view models."""

    def __init__(self) -> None:
        super().__init__()
        self._tasks: set[asyncio.Task[Any]] = set()
        self._cleared = False

    @property
    def is_cleared(self) -> bool:
        return self._cleared

    @property
    def active_tasks(self) -> frozenset[asyncio.Task[Any]]:
        return frozenset(self._tasks)

    def launch(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Start `coro` on the running loop, tied to this view model's lifetime."""
        if self._cleared:
            coro.close()
            raise RuntimeError(f"{type(self).__name__} is cleared")

        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def into(
        self, state: StateValue[Result[T]], block: Callable[[], Awaitable[T]]
    ) -> asyncio.Task[Any]:
        """Run `block` and publish its outcome into `state`.

        `state` becomes PendingResult immediately, then SuccessResult or
        ErrorResult. A cancelled load leaves the state pending.
        """
        state.value = PendingResult()

        async def _load() -> None:
            try:
                data = await block()
            except Exception as e:
                logger.warning("[%s] Loading failed: %s", type(self).__name__, e)
                state.value = ErrorResult(e)
            else:
                state.value = SuccessResult(data)

        return self.launch(_load())

    def on_cleared(self) -> None:
        """Cancel every task still running. Called once when the screen goes away."""
        if self._cleared:
            return
        self._cleared = True

        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        logger.debug(
            "[%s] Cleared, cancelled %d task(s)",
            type(self).__name__,
            len(pending),
            extra={"dev_only": True},
        )
