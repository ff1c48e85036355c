"""Input events delivered to the explorer.

These are decoded from terminal events by the widget layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

import rich.repr


class MouseButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OTHER = "other"

    @classmethod
    def from_number(cls, button: int) -> MouseButton:
        """Get a button from a terminal button number (1 left, 3 right)."""
        if button == 1:
            return cls.PRIMARY
        if button == 3:
            return cls.SECONDARY
        return cls.OTHER


@rich.repr.auto
@dataclass(frozen=True)
class KeyPress:
    """A key was pressed."""

    character: str
    """The character, or an empty string for keys without one."""


@rich.repr.auto
@dataclass(frozen=True)
class ButtonDown:
    """A mouse button went down over a cell."""

    row: int
    col: int
    button: MouseButton


@rich.repr.auto
@dataclass(frozen=True)
class Resize:
    """The drawing surface changed size."""

    width: int
    height: int


InputEvent: TypeAlias = KeyPress | ButtonDown | Resize
