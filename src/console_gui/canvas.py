"""
Canvas — draws border geometry into the screen buffer.

Each primitive validates its geometry before writing anything. A rejected
call is reported to the log box and returns False; it never raises and never
leaves a partial drawing behind.
"""
from __future__ import annotations

import logging

from . import borders
from .colors import Color
from .context import GuiContext
from .errors import GeometryBoundsError
from .glyphs import BorderStyle, Junction

logger = logging.getLogger(__name__)


class Canvas:
    def __init__(self, context: GuiContext) -> None:
        self._context = context

    def _colors(self, bg: Color | None, fg: Color | None) -> tuple[Color, Color]:
        config = self._context.config
        return bg or config.bg, fg or config.fg

    def _reject(self, operation: str, error: GeometryBoundsError) -> bool:
        logger.warning("%s rejected: %s", operation, error)
        self._context.report(f"{operation} error: {error}")
        return False

    def draw_line(
        self,
        x: int,
        y: int,
        width: int,
        style: BorderStyle = BorderStyle.SINGLE,
        left: Junction = Junction.NONE,
        right: Junction = Junction.NONE,
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> bool:
        """Draw a horizontal line, optionally ending in junction glyphs."""
        config = self._context.config
        try:
            borders.validate_line(x, y, width, config.width, config.height)
        except GeometryBoundsError as e:
            return self._reject("draw_line", e)

        bg, fg = self._colors(bg, fg)
        self._context.screen.write(x, y + 1, borders.horizontal_line(width, style, left, right), bg, fg)
        return True

    def draw_column(
        self,
        x: int,
        y: int,
        height: int,
        style: BorderStyle = BorderStyle.SINGLE,
        top: Junction = Junction.NONE,
        bottom: Junction = Junction.NONE,
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> bool:
        """Draw a vertical line, optionally ending in junction glyphs."""
        config = self._context.config
        try:
            borders.validate_column(x, y, height, config.width, config.height)
        except GeometryBoundsError as e:
            return self._reject("draw_column", e)

        bg, fg = self._colors(bg, fg)
        screen = self._context.screen
        for row, glyph in enumerate(borders.vertical_line(height, style, top, bottom)):
            screen.write(x, y + 1 + row, glyph, bg, fg)
        return True

    def draw_box(
        self,
        left: int,
        top: int,
        width: int,
        height: int,
        style: BorderStyle = BorderStyle.SINGLE,
        top_left: Junction = Junction.NONE,
        top_right: Junction = Junction.NONE,
        bottom_left: Junction = Junction.NONE,
        bottom_right: Junction = Junction.NONE,
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> bool:
        """
        Draw a box outline.

        The interior is filled with *bg* only when a background color is
        passed explicitly; otherwise whatever is inside stays untouched.
        """
        config = self._context.config
        try:
            borders.validate_box(left, top, width, height, config.width, config.height)
        except GeometryBoundsError as e:
            return self._reject("draw_box", e)

        fill = bg is not None
        bg, fg = self._colors(bg, fg)
        screen = self._context.screen
        top_row, side, bottom_row = borders.box_edges(
            width, style, top_left, top_right, bottom_left, bottom_right
        )

        row = top + 1
        screen.write(left, row, top_row, bg, fg)
        for y in range(row + 1, row + height - 1):
            if fill:
                screen.write(left, y, side + " " * (width - 2) + side, bg, fg)
            else:
                screen.write(left, y, side, bg, fg)
                screen.write(left + width - 1, y, side, bg, fg)
        screen.write(left, row + height - 1, bottom_row, bg, fg)
        return True

    def draw_line_zigzag(
        self,
        x: int,
        y: int,
        width: int,
        style: BorderStyle = BorderStyle.SINGLE,
        straight_edge: bool = False,
        flipped: bool = False,
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> bool:
        """Draw a two-row horizontal zigzag with its top row at *y*."""
        config = self._context.config
        try:
            borders.validate_zigzag_line(x, y, width, config.width, config.height)
        except GeometryBoundsError as e:
            return self._reject("draw_line_zigzag", e)

        bg, fg = self._colors(bg, fg)
        screen = self._context.screen
        first, second = borders.zigzag_line(width, style, straight_edge, flipped)
        row = y + 1
        screen.write(x, row + (1 if flipped else 0), first, bg, fg)
        screen.write(x + 1, row + (0 if flipped else 1), second, bg, fg)
        return True

    def draw_column_zigzag(
        self,
        x: int,
        y: int,
        height: int,
        style: BorderStyle = BorderStyle.SINGLE,
        straight_edge: bool = False,
        mirrored: bool = False,
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> bool:
        """Draw a three-column vertical zigzag with its left edge at *x*."""
        config = self._context.config
        try:
            borders.validate_zigzag_column(x, y, height, config.width, config.height)
        except GeometryBoundsError as e:
            return self._reject("draw_column_zigzag", e)

        bg, fg = self._colors(bg, fg)
        screen = self._context.screen
        for row, (offset, text) in enumerate(borders.zigzag_column(height, style, straight_edge, mirrored)):
            screen.write(x + offset, y + 1 + row, text, bg, fg)
        return True
