"""
Panel — a fixed rectangular text region that wraps, scrolls and highlights.

Provides:
- Interactivity: none / scroll only / scroll and select
- Panel: the text box itself
- scrollbar_thumb_row(): proportional scrollbar thumb position
- validate_panel(): region bounds check used by the panel factory

A panel keeps the unwrapped text as the source of truth and derives its
formatted lines from it. The selection cursor is a viewport row: it stays on
screen while the content scrolls underneath it.
"""
from __future__ import annotations

import logging
from enum import Enum

from .colors import Color
from .context import GuiContext
from .errors import PanelBoundsError
from .glyphs import SCROLL_DOWN, SCROLL_THUMB, SCROLL_TRACK, SCROLL_UP
from .layout import wrap_text

logger = logging.getLogger(__name__)

# Panels shorter than this never get a scrollbar
MIN_SCROLLBAR_HEIGHT = 3


class Interactivity(Enum):
    NONE = "none"
    SCROLL_ONLY = "scroll_only"
    SCROLL_AND_SELECT = "scroll_and_select"


def scrollbar_thumb_row(scroll_offset: int, height: int, total_lines: int) -> int:
    """
    Row of the scrollbar thumb inside a panel *height* rows tall.

    1 at the top, ``height - 2`` at the bottom-most offset, proportional in
    between.
    """
    if scroll_offset == 0:
        return 1
    if scroll_offset == total_lines - height:
        return height - 2
    return 1 + (height - 2) * (scroll_offset + height // 2) // total_lines


def validate_panel(left: int, top: int, width: int, height: int, grid_width: int, grid_height: int) -> None:
    if left < 0 or left >= grid_width:
        raise PanelBoundsError("left", "Origin point is beyond horizontal buffer bounds.")
    if top < 0 or top >= grid_height:
        raise PanelBoundsError("top", "Origin point is beyond vertical buffer bounds.")
    if width < 1 or height < 1:
        raise PanelBoundsError("width, height", "Can't be smaller than 1 by 1.")
    if left + width > grid_width:
        raise PanelBoundsError("width", "Too wide.")
    if top + height > grid_height:
        raise PanelBoundsError("height", "Too tall.")


class Panel:
    """
    A text box occupying ``width`` x ``height`` cells at screen position
    (``left``, ``top``).

    ``top`` is a screen row; use ``Panel.create`` to place a panel with
    caller coordinates. The region never changes after creation.
    """

    def __init__(
        self,
        context: GuiContext,
        left: int,
        top: int,
        width: int,
        height: int,
        selected_line: int = -1,
        text: str = "",
        bg: Color | None = None,
        fg: Color | None = None,
        inactive: Color | None = None,
    ) -> None:
        self._context = context
        self.left = left
        self.top = top
        self.width = width
        self.height = height

        self.bg = bg or context.config.bg
        self.fg = fg or context.config.fg
        self.inactive = inactive or context.config.inactive

        self._scroll_offset = 0
        self._selected_line = selected_line
        self._has_scrollbar = False
        self._text = ""
        self._lines: list[str] = []

        self.set_text(text)

    @classmethod
    def create(
        cls,
        context: GuiContext,
        left: int,
        top: int,
        width: int,
        height: int,
        text: str = "",
        bg: Color | None = None,
        fg: Color | None = None,
        interactivity: Interactivity = Interactivity.NONE,
    ) -> Panel:
        """
        Create a panel from caller coordinates (row 0 = first drawable row).

        Raises PanelBoundsError if the region does not fit the grid.
        """
        config = context.config
        validate_panel(left, top, width, height, config.width, config.height)
        selected_line = 0 if interactivity is Interactivity.SCROLL_AND_SELECT else -1
        return cls(context, left, top + 1, width, height, selected_line, text, bg, fg)

    def __repr__(self) -> str:
        return f"Panel(left={self.left}, top={self.top}, width={self.width}, height={self.height})"

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self.set_text(value)

    @property
    def formatted_lines(self) -> tuple[str, ...]:
        """Laid-out lines, each padded to the full panel width."""
        return tuple(line.ljust(self.width) for line in self._lines)

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def selected_line(self) -> int:
        return self._selected_line

    @property
    def has_scrollbar(self) -> bool:
        return self._has_scrollbar

    @property
    def text_width(self) -> int:
        """Columns available to text (the scrollbar takes the last one)."""
        return self.width - 1 if self._has_scrollbar else self.width

    @property
    def max_scroll_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    @property
    def selected_text(self) -> str:
        """The highlighted line without padding, or "" when nothing is selected."""
        if self._selected_line < 0:
            return ""
        index = self._scroll_offset + self._selected_line
        if index >= len(self._lines):
            return ""
        return self._lines[index].rstrip()

    def line(self, index: int) -> str:
        """Formatted line *index* without its padding."""
        return self._lines[index].rstrip()

    def __getitem__(self, index: int) -> str:
        return self.line(index)

    def __len__(self) -> int:
        return len(self._lines)

    def _needs_scrollbar(self, line_count: int) -> bool:
        return line_count > self.height and self.height >= MIN_SCROLLBAR_HEIGHT and self.width >= 2

    # ─────────────────────────────────────────────────────────────────────────
    # Text mutation
    # ─────────────────────────────────────────────────────────────────────────

    def set_text(self, text: str) -> None:
        """Replace the whole text, re-wrap it and re-render."""
        self._text = text
        lines = wrap_text(text, self.width)
        self._has_scrollbar = self._needs_scrollbar(len(lines))
        if self._has_scrollbar:
            lines = wrap_text(text, self.width - 1)

        if len(lines) < len(self._lines):
            if self._selected_line > len(lines) - 1:
                self._selected_line = max(len(lines) - 1, 0)
            # Blank what the longer text used to occupy
            self._lines = [" " * self.width] * len(self._lines)
            self.render(auto_scroll=True, scroll_to_bottom=False)

        self._lines = lines
        logger.debug("%r: text set, %d lines", self, len(lines))
        self.render()

    def append_text(
        self,
        text: str,
        line_breaks: int = 1,
        prepend: bool = False,
        auto_scroll: bool = False,
        animated: bool = False,
        delay_ms: int | None = None,
    ) -> None:
        """
        Add *text* after (or before, with *prepend*) the current text.

        *line_breaks* newlines separate the new text from the old. Only the
        new fragment is wrapped; the render animates just the new lines.
        """
        separator = "\n" * line_breaks
        text = text + separator if prepend else separator + text

        new_lines = wrap_text(text, self.text_width, trim_trailing_newlines=False)
        existing = len(self._lines) if self._text else 0

        if not self._has_scrollbar and self._needs_scrollbar(existing + len(new_lines)):
            self._has_scrollbar = True
            new_lines = wrap_text(text, self.text_width, trim_trailing_newlines=False)
            if self._text:
                self._lines = wrap_text(self._text, self.text_width, trim_trailing_newlines=False)

        if not self._text:
            self._text = text
            self._lines = new_lines
            start, end = 0, len(new_lines) - 1
        elif prepend:
            self._text = text + "\n" + self._text
            self._lines = new_lines + self._lines
            start, end = 0, len(new_lines) - 1
        else:
            start = len(self._lines)
            self._text = self._text + "\n" + text
            self._lines = self._lines + new_lines
            end = len(self._lines) - 1

        logger.debug("%r: appended %d lines (prepend=%s)", self, len(new_lines), prepend)
        self.render(auto_scroll, not prepend, animated, delay_ms, start, end)

    def clear(self) -> None:
        self.set_text("")

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    def prev_line(self) -> None:
        """Move the selection up one row, scrolling when it is already at the top."""
        if self._selected_line > 0:
            self._selected_line -= 1
        else:
            self.scroll_up(render=False)
        self.render()

    def next_line(self) -> None:
        """Move the selection down one row, scrolling when it is at the bottom row."""
        if self._selected_line >= 0 and self._scroll_offset + self._selected_line >= len(self._lines) - 1:
            return
        if 0 <= self._selected_line < self.height - 1:
            self._selected_line += 1
        else:
            self.scroll_down(render=False)
        self.render()

    def scroll_up(self, render: bool = True) -> None:
        if len(self._lines) <= self.height:
            return
        self._scroll_offset = max(self._scroll_offset - 1, 0)
        if render:
            self.render()

    def scroll_down(self, render: bool = True) -> None:
        if len(self._lines) <= self.height:
            return
        self._scroll_offset = min(self._scroll_offset + 1, self.max_scroll_offset)
        if render:
            self.render()

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def _row_colors(self, row: int) -> tuple[Color, Color]:
        """(background, foreground) for viewport *row*."""
        focused = self._context.focus.focused
        if focused is not None and row == self._selected_line:
            if focused is self:
                return self.fg, self.bg
            return self.inactive, self.fg
        return self.bg, self.fg

    def _draw_scrollbar_cell(self, row: int, thumb: int) -> None:
        total = len(self._lines)
        if row == 0 and self._scroll_offset > 0:
            glyph = SCROLL_UP
        elif row == self.height - 1 and self._scroll_offset + self.height < total:
            glyph = SCROLL_DOWN
        elif row != thumb:
            glyph = SCROLL_TRACK
        else:
            return
        self._context.screen.write(self.left + self.width - 1, self.top + row, glyph, self.bg, self.fg)

    def render(
        self,
        auto_scroll: bool = False,
        scroll_to_bottom: bool = True,
        animated: bool = False,
        delay_ms: int | None = None,
        animate_start: int = -1,
        animate_end: int = -1,
    ) -> None:
        """
        Draw the visible lines, the scrollbar and the selection highlight.

        With *auto_scroll* the viewport jumps to the top, or to the bottom when
        *scroll_to_bottom*. With *animated* the lines ``animate_start`` to
        ``animate_end`` (all lines when both are -1) are first blanked, then
        revealed through the context's reveal strategy.
        """
        screen = self._context.screen
        total = len(self._lines)

        if auto_scroll:
            self._scroll_offset = 0
            if scroll_to_bottom and total > self.height:
                self._scroll_offset = total - self.height

        if delay_ms is None:
            delay_ms = self._context.config.reveal_delay_ms
        animate_all = animated and animate_start == -1 and animate_end == -1

        def animates(index: int) -> bool:
            return animate_all or animate_start <= index <= animate_end

        thumb = 0
        if self._has_scrollbar:
            thumb = scrollbar_thumb_row(self._scroll_offset, self.height, total)
            screen.write(self.left + self.width - 1, self.top + thumb, SCROLL_THUMB, self.bg, self.fg)

        visible = max(0, min(self.height, total - self._scroll_offset))
        for row in range(visible):
            index = self._scroll_offset + row
            bg, fg = self._row_colors(row)
            if animated and animates(index):
                screen.write(self.left, self.top + row, " " * self.text_width, bg, fg)
            else:
                screen.write(self.left, self.top + row, self._lines[index], bg, fg)
            if self._has_scrollbar:
                self._draw_scrollbar_cell(row, thumb)

        if animated:
            for row in range(visible):
                index = self._scroll_offset + row
                if animates(index):
                    bg, fg = self._row_colors(row)
                    self._context.reveal.reveal(
                        screen, self.left, self.top + row, self._lines[index].rstrip(), bg, fg, delay_ms
                    )
                elif index > animate_end:
                    break

        screen.home()
