"""Module: sharing.py.

Author: Michael Economou
Date: 2026-10-18

FiniteSharedStream - multicast a finite async stream to several consumers.

The source is iterated exactly once, by a single producer task started on
the first subscribe(). Every value is broadcast in order to the subscribers
registered at that moment (no replay), followed by completion or the source
error. When the last subscriber goes away, or the owning `async with` block
exits, the producer is cancelled and the source is closed; subscribers still
attached at that point are cancelled too.

Usage:
    async with FiniteSharedStream(repository.set_current_color(color)) as stream:
        async with asyncio.TaskGroup() as group:
            group.create_task(consume(stream.subscribe()))
            group.create_task(consume(sample(stream.subscribe(), 0.2)))
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable, AsyncIterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from colorpick.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class _Completion:
    """Terminal queue marker; carries the source error, if any."""

    error: BaseException | None = None
    cancelled: bool = False


class FiniteSharedStream(Generic[T]):
    """Share one run of an async iterable between several subscribers."""

    def __init__(self, source: AsyncIterable[T]) -> None:
        self._source = source
        self._subscribers: list[asyncio.Queue[Any]] = []
        self._producer: asyncio.Task[None] | None = None
        self._completion: _Completion | None = None

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def is_finished(self) -> bool:
        return self._completion is not None

    def subscribe(self) -> AsyncIterator[T]:
        """Register a subscriber and return its iterator.

        Registration happens here, not on first iteration, so subscribers
        created before the caller yields to the loop all see the first value.
        """
        queue: asyncio.Queue[Any] = asyncio.Queue()
        if self._completion is not None:
            queue.put_nowait(self._completion)
        else:
            self._subscribers.append(queue)

        if self._producer is None:
            self._producer = asyncio.get_running_loop().create_task(self._produce())
            logger.debug("[FiniteSharedStream] Producer started", extra={"dev_only": True})

        return self._iterate(queue)

    async def _produce(self) -> None:
        error: BaseException | None = None
        cancelled = False
        try:
            async for value in self._source:
                for queue in tuple(self._subscribers):
                    queue.put_nowait(value)
        except asyncio.CancelledError:
            cancelled = True
            raise
        except Exception as exc:
            error = exc
        finally:
            self._completion = _Completion(error, cancelled)
            for queue in self._subscribers:
                queue.put_nowait(self._completion)

    async def _iterate(self, queue: asyncio.Queue[Any]) -> AsyncIterator[T]:
        try:
            while True:
                item = await queue.get()
                if isinstance(item, _Completion):
                    if item.cancelled:
                        raise asyncio.CancelledError
                    if item.error is not None:
                        raise item.error
                    return
                yield item
        finally:
            self._unsubscribe(queue)

    def _unsubscribe(self, queue: asyncio.Queue[Any]) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)
        if not self._subscribers:
            self._cancel_producer()

    def _cancel_producer(self) -> None:
        if self._producer is not None and not self._producer.done():
            logger.debug("[FiniteSharedStream] No subscribers left, cancelling producer")
            self._producer.cancel()

    async def aclose(self) -> None:
        """Cancel the producer (if still running) and wait for it to unwind."""
        self._cancel_producer()
        if self._producer is not None:
            await asyncio.wait([self._producer])

    async def __aenter__(self) -> FiniteSharedStream[T]:
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()
