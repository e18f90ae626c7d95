"""
Screen buffer — the fixed character grid every component writes into.

Provides:
- Cell: one character cell (glyph + colors)
- ScreenBuffer: width x rows grid mirrored onto a Terminal

Writes are differential: only the span of cells that actually changed is
sent to the terminal, so re-rendering an unchanged panel costs nothing.
"""
from __future__ import annotations

from dataclasses import dataclass

from wcwidth import wcwidth

from .colors import Color
from .errors import GeometryBoundsError
from .terminal import Terminal

# Placeholder for characters that don't occupy exactly one cell
REPLACEMENT_CHAR = "?"


@dataclass
class Cell:
    char: str = " "
    bg: Color = Color.BLACK
    fg: Color = Color.WHITE


def to_cell_text(text: str) -> str:
    """Replace every character that is not exactly one cell wide."""
    if text.isascii() and text.isprintable():
        return text
    return "".join(ch if wcwidth(ch) == 1 else REPLACEMENT_CHAR for ch in text)


class ScreenBuffer:
    """
    Fixed-size grid of cells addressed by (x, y) in screen coordinates.

    Row 0 is the log row; drawable rows start at 1. The buffer never
    resizes.
    """

    def __init__(self, terminal: Terminal, width: int, rows: int,
                 bg: Color = Color.BLACK, fg: Color = Color.WHITE) -> None:
        self.terminal = terminal
        self.width = width
        self.rows = rows
        self._bg = bg
        self._fg = fg
        self._cells: list[list[Cell]] = [
            [Cell(" ", bg, fg) for _ in range(width)] for _ in range(rows)
        ]

    def cell(self, x: int, y: int) -> Cell:
        self._check(x, y, 1)
        return self._cells[y][x]

    def row_text(self, y: int) -> str:
        """Characters of screen row *y*."""
        self._check(0, y, 0)
        return "".join(c.char for c in self._cells[y])

    def text_at(self, x: int, y: int, length: int) -> str:
        self._check(x, y, length)
        return "".join(c.char for c in self._cells[y][x:x + length])

    def write(self, x: int, y: int, text: str, bg: Color, fg: Color) -> None:
        """Write a run of characters starting at (x, y)."""
        if not text:
            return
        text = to_cell_text(text)
        self._check(x, y, len(text))

        row = self._cells[y]
        first = last = -1
        for i, ch in enumerate(text):
            cell = row[x + i]
            if cell.char != ch or cell.bg is not bg or cell.fg is not fg:
                if first < 0:
                    first = i
                last = i
                cell.char, cell.bg, cell.fg = ch, bg, fg

        if first < 0:
            return
        self.terminal.set_colors(bg, fg)
        self.terminal.move_to(x + first, y)
        self.terminal.write(text[first:last + 1])

    def clear(self, bg: Color | None = None, fg: Color | None = None) -> None:
        """Blank the whole grid and the terminal."""
        self._bg = bg or self._bg
        self._fg = fg or self._fg
        for row in self._cells:
            for cell in row:
                cell.char, cell.bg, cell.fg = " ", self._bg, self._fg
        self.terminal.set_colors(self._bg, self._fg)
        self.terminal.clear_screen()

    def home(self) -> None:
        """Park the cursor at (0, 0)."""
        self.terminal.move_to(0, 0)

    def _check(self, x: int, y: int, length: int) -> None:
        if y < 0 or y >= self.rows:
            raise GeometryBoundsError("y", f"Row {y} is beyond buffer bounds.")
        if x < 0 or x + length > self.width:
            raise GeometryBoundsError("x", f"Columns {x}..{x + length - 1} are beyond buffer bounds.")
