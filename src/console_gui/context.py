"""Shared state of one toolkit instance, handed to every component."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .config import GuiConfig
from .focus import FocusRegistry
from .reveal import RevealStrategy
from .screen import ScreenBuffer

if TYPE_CHECKING:
    from .log_box import LogBox


@dataclass
class GuiContext:
    """
    Built once by ``GUI`` and passed by reference to panels, groups and the
    canvas. ``log`` is filled in as soon as the log box exists.
    """
    config: GuiConfig
    screen: ScreenBuffer
    focus: FocusRegistry
    reveal: RevealStrategy
    log: LogBox | None = None

    def report(self, message: str) -> None:
        """Print *message* to the log box, if there is one yet."""
        if self.log is not None:
            self.log.print(message)
