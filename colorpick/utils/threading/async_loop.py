"""Module: async_loop.py.

Author: Michael Economou
Date: 2026-10-18

AsyncLoopThread - an asyncio event loop running on its own daemon thread.

The Qt event loop owns the GUI thread, so view models live on this loop
instead. The GUI thread posts work with call() / run_sync() and receives
state back through queued Qt signals. Everything a view model touches runs on
this one loop thread.
"""

from __future__ import annotations

import asyncio
import inspect
import threading
from collections.abc import Callable
from typing import Any

from colorpick.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class AsyncLoopThread:
    """Owns an event loop and the thread running it."""

    def __init__(self, name: str = "colorpick-async") -> None:
        self._name = name
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._ready = threading.Event()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            raise RuntimeError("AsyncLoopThread is not started")
        return self._loop

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, timeout: float = 5.0) -> None:
        """Start the loop thread and wait until the loop is running."""
        if self.is_running:
            return

        self._ready.clear()
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        if not self._ready.wait(timeout):
            raise RuntimeError(f"{self._name} did not start within {timeout}s")
        logger.debug("[AsyncLoopThread] %s started", self._name, extra={"dev_only": True})

    def _run(self) -> None:
        loop = self.loop
        asyncio.set_event_loop(loop)
        loop.call_soon(self._ready.set)
        try:
            loop.run_forever()
        finally:
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.close()

    def call(self, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule `fn(*args)` on the loop thread (fire and forget)."""
        self.loop.call_soon_threadsafe(fn, *args)

    def run_sync(self, fn: Callable[..., Any], *args: Any, timeout: float | None = 5.0) -> Any:
        """Run `fn(*args)` on the loop thread and return its result.

        Coroutine results are awaited. Must not be called from the loop thread.
        """
        if threading.current_thread() is self._thread:
            raise RuntimeError("run_sync() called from the loop thread")

        async def _invoke() -> Any:
            result = fn(*args)
            if inspect.isawaitable(result):
                result = await result
            return result

        return asyncio.run_coroutine_threadsafe(_invoke(), self.loop).result(timeout)

    def stop(self, timeout: float = 5.0) -> None:
        """Cancel remaining tasks, stop the loop and join the thread."""
        if not self.is_running:
            return

        async def _cancel_all() -> None:
            current = asyncio.current_task()
            tasks = [task for task in asyncio.all_tasks() if task is not current]
            for task in tasks:
                task.cancel()
            if tasks:
                await asyncio.wait(tasks)
            logger.debug("[AsyncLoopThread] Cancelled %d task(s) on stop", len(tasks))

        try:
            asyncio.run_coroutine_threadsafe(_cancel_all(), self.loop).result(timeout)
        finally:
            self.loop.call_soon_threadsafe(self.loop.stop)
            if self._thread is not None:
                self._thread.join(timeout)
            self._thread = None
            self._loop = None
            logger.debug("[AsyncLoopThread] %s stopped", self._name, extra={"dev_only": True})
