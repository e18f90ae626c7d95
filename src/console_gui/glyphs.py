"""
Box-drawing glyph tables.

Provides:
- BorderStyle: single or double line
- Junction (aliased EdgeStyle / CornerStyle): plain end/corner or a junction variant
- Corner: the four corner glyph families
- horizontal_glyph(), vertical_glyph(), corner_glyph(): tagged lookups
"""
from __future__ import annotations

from enum import Enum


class BorderStyle(Enum):
    SINGLE = "single"
    DOUBLE = "double"


class Junction(Enum):
    """How a line end or box corner meets the border it touches."""
    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    CROSSING = "crossing"


EdgeStyle = Junction
CornerStyle = Junction


class Corner(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


_HORIZONTAL: dict[BorderStyle, str] = {
    BorderStyle.SINGLE: "─",
    BorderStyle.DOUBLE: "═",
}

_VERTICAL: dict[BorderStyle, str] = {
    BorderStyle.SINGLE: "│",
    BorderStyle.DOUBLE: "║",
}

# (single, double) per corner family and junction
_CORNER_PAIRS: dict[Corner, dict[Junction, tuple[str, str]]] = {
    Corner.TOP_LEFT: {
        Junction.NONE: ("┌", "╔"),
        Junction.VERTICAL: ("├", "╠"),
        Junction.HORIZONTAL: ("┬", "╦"),
        Junction.CROSSING: ("┼", "╬"),
    },
    Corner.TOP_RIGHT: {
        Junction.NONE: ("┐", "╗"),
        Junction.VERTICAL: ("┤", "╣"),
        Junction.HORIZONTAL: ("┬", "╦"),
        Junction.CROSSING: ("┼", "╬"),
    },
    Corner.BOTTOM_LEFT: {
        Junction.NONE: ("└", "╚"),
        Junction.VERTICAL: ("├", "╠"),
        Junction.HORIZONTAL: ("┴", "╩"),
        Junction.CROSSING: ("┼", "╬"),
    },
    Corner.BOTTOM_RIGHT: {
        Junction.NONE: ("┘", "╝"),
        Junction.VERTICAL: ("┤", "╣"),
        Junction.HORIZONTAL: ("┴", "╩"),
        Junction.CROSSING: ("┼", "╬"),
    },
}

CORNER_GLYPHS: dict[Corner, dict[tuple[BorderStyle, Junction], str]] = {
    corner: {
        (style, junction): pair[0 if style is BorderStyle.SINGLE else 1]
        for junction, pair in variants.items()
        for style in BorderStyle
    }
    for corner, variants in _CORNER_PAIRS.items()
}

# Panel scrollbar glyphs
SCROLL_UP = "▲"
SCROLL_DOWN = "▼"
SCROLL_THUMB = "█"
SCROLL_TRACK = "░"


def horizontal_glyph(style: BorderStyle) -> str:
    return _HORIZONTAL[style]


def vertical_glyph(style: BorderStyle) -> str:
    return _VERTICAL[style]


def corner_glyph(corner: Corner, style: BorderStyle, junction: Junction = Junction.NONE) -> str:
    return CORNER_GLYPHS[corner][(style, junction)]
