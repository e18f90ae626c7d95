"""
Toolkit configuration — grid size, window title and default colors.

The grid is fixed for the lifetime of a GUI instance. Every drawing and
panel-creation call that omits a color falls back to the values here.
"""
from __future__ import annotations

from dataclasses import dataclass

from .colors import Color

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 48
DEFAULT_BG = Color.DARK_BLUE
DEFAULT_FG = Color.YELLOW
DEFAULT_INACTIVE = Color.DARK_YELLOW
DEFAULT_REVEAL_DELAY_MS = 10


@dataclass(frozen=True)
class GuiConfig:
    """
    Fixed settings of one toolkit instance.

    ``height`` counts drawable rows only; the screen owns one extra row
    (row 0) for the log box.
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    title: str = ""
    bg: Color = DEFAULT_BG
    fg: Color = DEFAULT_FG
    inactive: Color = DEFAULT_INACTIVE
    log_bg: Color = Color.BLACK
    log_fg: Color = Color.WHITE
    reveal_delay_ms: int = DEFAULT_REVEAL_DELAY_MS

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")

    @property
    def rows(self) -> int:
        """Screen rows including the log row."""
        return self.height + 1
