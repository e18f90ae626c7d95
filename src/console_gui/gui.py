"""
GUI — one toolkit instance: the screen, the focus registry, the log box,
the canvas and the panel group factories, built around a single context.

Typical use::

    gui = GUI(GuiConfig(title="Playing Cards!"))
    gui.initialize()
    gui.canvas.draw_box(0, 0, gui.width, 9, BorderStyle.DOUBLE)
    menu = gui.selectable_group()
    menu.add(2, 2, 20, 5, "Play\\nQuit")
    gui.log.print("Ready.")
"""
from __future__ import annotations

import logging
import os

from .canvas import Canvas
from .colors import Color
from .config import GuiConfig
from .context import GuiContext
from .focus import FocusRegistry
from .group import PanelGroup
from .log_box import LogBox
from .reveal import InstantReveal, RevealStrategy, TypewriterReveal
from .screen import ScreenBuffer
from .terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)


def _default_reveal() -> RevealStrategy:
    if os.environ.get("CONSOLE_GUI_NO_ANIMATION", "0") == "1":
        return InstantReveal()
    return TypewriterReveal()


class GUI:
    def __init__(
        self,
        config: GuiConfig | None = None,
        terminal: Terminal | None = None,
        reveal: RevealStrategy | None = None,
    ) -> None:
        self.config = config or GuiConfig()
        self.terminal = terminal or ProcessTerminal()
        self.screen = ScreenBuffer(self.terminal, self.config.width, self.config.rows,
                                   self.config.bg, self.config.fg)
        self.context = GuiContext(
            config=self.config,
            screen=self.screen,
            focus=FocusRegistry(),
            reveal=reveal or _default_reveal(),
        )
        self.log = LogBox(self.context)
        self.context.log = self.log
        self.canvas = Canvas(self.context)
        self._initialized = False

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def focus(self) -> FocusRegistry:
        return self.context.focus

    def initialize(self, title: str | None = None) -> None:
        """
        Prepare the terminal: fixed grid, window title, hidden cursor and a
        screen cleared to the default colors. Call once, before drawing.
        """
        if self._initialized:
            logger.warning("GUI.initialize called twice; ignoring")
            return
        self._initialized = True
        self.terminal.start(self.config.width, self.config.rows)
        self.terminal.set_title(title if title is not None else self.config.title)
        self.terminal.hide_cursor()
        self.screen.clear(self.config.bg, self.config.fg)
        self.log.panel.render()

    def shutdown(self) -> None:
        if not self._initialized:
            return
        self._initialized = False
        self.terminal.stop()

    # ─────────────────────────────────────────────────────────────────────────
    # Group factories
    # ─────────────────────────────────────────────────────────────────────────

    def label_group(self) -> PanelGroup:
        return PanelGroup.labels(self.context)

    def scrolling_group(self) -> PanelGroup:
        return PanelGroup.scrolling(self.context)

    def selectable_group(self) -> PanelGroup:
        return PanelGroup.selectable(self.context)

    def label_sequence(
        self,
        count: int,
        horizontal: bool,
        left: int,
        top: int,
        width: int,
        height: int,
        bg: Color | None = None,
        fg: Color | None = None,
    ) -> PanelGroup:
        return PanelGroup.label_sequence(self.context, count, horizontal, left, top, width, height, bg, fg)
