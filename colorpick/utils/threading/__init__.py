"""Threading helpers."""

from colorpick.utils.threading.async_loop import AsyncLoopThread

__all__ = ["AsyncLoopThread"]
