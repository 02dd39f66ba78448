"""Async stream helpers: multicast sharing and time sampling."""

from colorpick.utils.flow.sampling import sample
from colorpick.utils.flow.sharing import FiniteSharedStream

__all__ = ["FiniteSharedStream", "sample"]
