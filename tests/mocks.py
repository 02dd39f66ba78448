"""
Module: mocks.py

Author: Michael Economou
Date: 2026-10-18

Fakes for the view model collaborators.
"""

import asyncio

from colorpick.domain.named_color import ColorNotFoundError


class FakeColorsRepository:
    """ColorsRepository fake with scripted progress and failure injection.

    Attributes:
        progress: Percentages yielded by set_current_color()
        step_delay: Sleep before each yielded percentage (seconds)
        load_error: Raised by get_available_colors() when set
        save_error: Raised by set_current_color() after all progress when set
        persist_count: Number of times the persist side effect started
        persist_closed: Number of persist runs that were interrupted

    """

    def __init__(self, colors, *, progress=(0, 10, 55, 100), step_delay=0.0):
        self.colors = list(colors)
        self.progress = tuple(progress)
        self.step_delay = step_delay
        self.load_delay = 0.0
        self.load_error = None
        self.save_error = None
        self.load_calls = 0
        self.persist_count = 0
        self.persist_finished = 0
        self.persist_closed = 0
        self.saved = []

    async def get_available_colors(self):
        self.load_calls += 1
        await asyncio.sleep(self.load_delay)
        if self.load_error is not None:
            raise self.load_error
        return list(self.colors)

    async def get_by_id(self, color_id):
        await asyncio.sleep(0)
        for color in self.colors:
            if color.id == color_id:
                return color
        raise ColorNotFoundError(color_id)

    async def get_current_color(self):
        return self.colors[0]

    async def set_current_color(self, color):
        self.persist_count += 1
        completed = False
        try:
            for percentage in self.progress:
                await asyncio.sleep(self.step_delay)
                yield percentage
            if self.save_error is not None:
                raise self.save_error
            self.saved.append(color)
            completed = True
            self.persist_finished += 1
        finally:
            if not completed:
                self.persist_closed += 1


class RecordingNavigator:
    """Navigator recording go_back() calls."""

    def __init__(self):
        self.calls = []

    def go_back(self, result=None):
        self.calls.append(result)


class RecordingToasts:
    """Toasts recording messages."""

    def __init__(self):
        self.messages = []

    def toast(self, message):
        self.messages.append(message)
