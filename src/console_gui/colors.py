"""
Console colors — the sixteen classic console colors and their ANSI SGR codes.

Provides:
- Color: enum of the sixteen console colors
- sgr(): escape sequence selecting a background/foreground pair
"""
from __future__ import annotations

from enum import Enum


class Color(Enum):
    """Console color, valued by its ANSI foreground SGR code."""

    BLACK = 30
    DARK_BLUE = 34
    DARK_GREEN = 32
    DARK_CYAN = 36
    DARK_RED = 31
    DARK_MAGENTA = 35
    DARK_YELLOW = 33
    GRAY = 37
    DARK_GRAY = 90
    BLUE = 94
    GREEN = 92
    CYAN = 96
    RED = 91
    MAGENTA = 95
    YELLOW = 93
    WHITE = 97

    @property
    def fg_code(self) -> int:
        return self.value

    @property
    def bg_code(self) -> int:
        return self.value + 10


def sgr(bg: Color, fg: Color) -> str:
    """Return the SGR sequence that selects *bg* on *fg*."""
    return f"\x1b[{bg.bg_code};{fg.fg_code}m"


SGR_RESET = "\x1b[0m"
