"""Module: sampling.py.

Author: Michael Economou
Date: 2026-10-18

Time sampling of async streams.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable, AsyncIterator
from typing import TypeVar

T = TypeVar("T")

_NOTHING = object()


async def sample(source: AsyncIterable[T], interval: float) -> AsyncIterator[T]:
    """Emit the latest source value once per `interval` seconds.

    Values arriving within one window replace each other (last value wins);
    a window without new values emits nothing. When the source completes, a
    value still pending is delivered at the next tick before this iterator
    finishes, so the final value is never lost. A source error is re-raised
    after that last delivery. Only values actually produced by the source are
    emitted.

    Args:
        source: Upstream async iterable
        interval: Sampling period in seconds (> 0)

    """
    if interval <= 0:
        raise ValueError(f"sampling interval must be positive, got {interval}")

    latest: object = _NOTHING
    failure: BaseException | None = None
    finished = asyncio.Event()

    async def _drain() -> None:
        nonlocal latest, failure
        try:
            async for value in source:
                latest = value
        except Exception as exc:
            failure = exc
        finally:
            finished.set()

    drain = asyncio.get_running_loop().create_task(_drain())
    try:
        while True:
            await asyncio.sleep(interval)
            if latest is not _NOTHING:
                value, latest = latest, _NOTHING
                yield value  # type: ignore[misc]
            # A value stored while suspended at yield still gets its tick
            if finished.is_set() and latest is _NOTHING:
                break
        if failure is not None:
            raise failure
    finally:
        if not drain.done():
            drain.cancel()
            await asyncio.wait([drain])
