"""Module: named_color.py.

Author: Michael Economou
Date: 2026-10-18

NamedColor - a selectable, identifiable color entry.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NamedColor:
    """A color the user can pick.

    Attributes:
        id: Unique identifier
        name: Display name
        value: 32-bit ARGB color value

    """

    id: int
    name: str
    value: int


class ColorNotFoundError(LookupError):
    """Raised when a color id is not known to the repository."""

    def __init__(self, color_id: int):
        super().__init__(f"Color with id {color_id} not found")
        self.color_id = color_id
