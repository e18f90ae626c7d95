"""
PanelGroup — panels sharing one selection index and one interactivity mode.

All write and navigation calls act on the group's focused panel. Focus
changes also move the process-wide focus registry, so exactly one panel
across all groups draws its selection in the active colors.
"""
from __future__ import annotations

import logging
from typing import Iterator

from .colors import Color
from .context import GuiContext
from .errors import PanelBoundsError
from .panel import Interactivity, Panel

logger = logging.getLogger(__name__)


class PanelGroup:
    def __init__(self, context: GuiContext, interactivity: Interactivity = Interactivity.NONE) -> None:
        self._context = context
        self._panels: list[Panel] = []
        self._selected_index = 0
        self.interactivity = interactivity

    # ─────────────────────────────────────────────────────────────────────────
    # Factories
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def labels(cls, context: GuiContext) -> PanelGroup:
        return cls(context, Interactivity.NONE)

    @classmethod
    def scrolling(cls, context: GuiContext) -> PanelGroup:
        return cls(context, Interactivity.SCROLL_ONLY)

    @classmethod
    def selectable(cls, context: GuiContext) -> PanelGroup:
        return cls(context, Interactivity.SCROLL_AND_SELECT)

    @classmethod
    def label_sequence(
        cls,
        context: GuiContext,
        count: int,
        horizontal: bool,
        left: int,
        top: int,
        width: int,
        height: int,
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> PanelGroup:
        """A label group of *count* equal panels laid side by side or stacked."""
        group = cls(context, Interactivity.NONE)
        for _ in range(count):
            group.add(left, top, width, height, "", bg, fg)
            if horizontal:
                left += width
            else:
                top += height
        return group

    # ─────────────────────────────────────────────────────────────────────────
    # Membership
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._panels)

    def __getitem__(self, index: int) -> Panel:
        return self._panels[index]

    def __iter__(self) -> Iterator[Panel]:
        return iter(self._panels)

    @property
    def is_interactive(self) -> bool:
        return self.interactivity is not Interactivity.NONE

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @selected_index.setter
    def selected_index(self, value: int) -> None:
        if value >= len(self._panels):
            self._selected_index = 0
        elif value < 0:
            self._selected_index = len(self._panels) - 1
        else:
            self._selected_index = value

    @property
    def focused_panel(self) -> Panel | None:
        if not self._panels:
            return None
        return self._panels[self._selected_index]

    def add(
        self,
        left: int,
        top: int,
        width: int,
        height: int,
        text: str = "",
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> Panel | None:
        """
        Create a panel in this group from caller coordinates.

        A region that doesn't fit the grid is reported to the log box and
        ``None`` is returned.
        """
        try:
            panel = Panel.create(self._context, left, top, width, height, text, bg, fg, self.interactivity)
        except PanelBoundsError as e:
            logger.warning("Panel creation rejected: %s", e)
            self._context.report(f"Panel creation error: {e}")
            return None

        self._panels.append(panel)
        if self.is_interactive and not self._context.focus.has_focus():
            self._context.focus.focus(self._panels[0])
            self._panels[0].render()
        return panel

    # ─────────────────────────────────────────────────────────────────────────
    # Focus
    # ─────────────────────────────────────────────────────────────────────────

    def _move_focus(self, step: int) -> None:
        if not self._panels or not self.is_interactive:
            return
        # The previous holder may live in another group
        previous = self._context.focus.focused
        self.selected_index = self._selected_index + step
        current = self._panels[self._selected_index]

        self._context.focus.focus(current)
        if previous is not None and previous is not current:
            previous.render()
        current.render()

    def focus_next(self) -> None:
        """Move focus to the next panel, wrapping to the first."""
        self._move_focus(1)

    def focus_previous(self) -> None:
        """Move focus to the previous panel, wrapping to the last."""
        self._move_focus(-1)

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation inside the focused panel
    # ─────────────────────────────────────────────────────────────────────────

    def prev_selection(self) -> None:
        if not self._panels or not self.is_interactive:
            return
        self._panels[self._selected_index].prev_line()

    def next_selection(self) -> None:
        if not self._panels or not self.is_interactive:
            return
        self._panels[self._selected_index].next_line()

    def scroll_up(self) -> None:
        if not self._panels or not self.is_interactive:
            return
        self._panels[self._selected_index].scroll_up()

    def scroll_down(self) -> None:
        if not self._panels or not self.is_interactive:
            return
        self._panels[self._selected_index].scroll_down()

    def read_selection(self) -> str:
        """
        Text of the focused panel's selected line, or "" when selection is off.

        The line is the one under the visible highlight, i.e. formatted line
        ``scroll_offset + selected_line`` of the focused panel.
        """
        if not self._panels or not self.is_interactive:
            return ""
        return self._panels[self._selected_index].selected_text

    # ─────────────────────────────────────────────────────────────────────────
    # Text of the focused panel
    # ─────────────────────────────────────────────────────────────────────────

    def read_text(self) -> str:
        if not self._panels:
            return ""
        return self._panels[self._selected_index].text

    def write_text(self, text: str) -> None:
        if not self._panels:
            return
        self._panels[self._selected_index].set_text(text)

    def refresh(self) -> None:
        if not self._panels:
            return
        self._panels[self._selected_index].render()

    def clear_text(self) -> None:
        if not self._panels:
            return
        self._panels[self._selected_index].clear()

    def insert_animated(self, text: str) -> None:
        """Type *text* in above the focused panel's current text."""
        if not self._panels:
            return
        self._panels[self._selected_index].append_text(text, line_breaks=2, prepend=True, animated=True)
