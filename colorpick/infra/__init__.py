"""Concrete implementations of application ports."""

from colorpick.infra.in_memory_colors_repository import InMemoryColorsRepository

__all__ = ["InMemoryColorsRepository"]
