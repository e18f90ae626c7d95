"""
Log box — the single-line panel on screen row 0.

Every message is numbered and placed above the previous ones, so the row
always shows the latest entry; older entries are reached by scrolling.
"""
from __future__ import annotations

import logging

from .context import GuiContext
from .panel import Panel

logger = logging.getLogger(__name__)


class LogBox:
    def __init__(self, context: GuiContext) -> None:
        config = context.config
        self._entries = 0
        self.panel = Panel(context, 0, 0, config.width, 1, -1, "", config.log_bg, config.log_fg)

    @property
    def entries(self) -> int:
        return self._entries

    @property
    def text(self) -> str:
        return self.panel.text

    def print(self, message: str) -> None:
        """Add a numbered entry above the previous ones and redraw."""
        previous = self.panel.text
        entry = f"({self._entries:02d}) : {message}"
        self._entries += 1
        logger.info(entry)
        self.panel.set_text(f"{entry}\n{previous}" if previous else entry)

    def scroll_up(self) -> None:
        self.panel.scroll_up()

    def scroll_down(self) -> None:
        self.panel.scroll_down()
