"""
Terminal abstraction — the single surface every component draws through.

Provides:
- Terminal: abstract base class (interface)
- ProcessTerminal: real terminal driven with ANSI sequences on sys.stdout
"""
from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod

from .colors import SGR_RESET, Color, sgr

# ─────────────────────────────────────────────────────────────────────────────
# Terminal ABC
# ─────────────────────────────────────────────────────────────────────────────

class Terminal(ABC):
    """
    Minimal cell-addressed terminal interface.

    Coordinates are zero-based (x = column, y = row). The toolkit assumes a
    single writer; implementations need no locking.
    """

    @abstractmethod
    def start(self, columns: int, rows: int) -> None:
        """Prepare the terminal for a fixed grid of *columns* x *rows*."""

    @abstractmethod
    def stop(self) -> None:
        """Restore the terminal state."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Write text at the current cursor position."""

    @abstractmethod
    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to column *x*, row *y*."""

    @abstractmethod
    def set_colors(self, bg: Color, fg: Color) -> None:
        """Select the colors used by subsequent writes."""

    @abstractmethod
    def hide_cursor(self) -> None:
        """Hide the cursor."""

    @abstractmethod
    def show_cursor(self) -> None:
        """Show the cursor."""

    @abstractmethod
    def clear_screen(self) -> None:
        """Clear the screen with the current colors and move the cursor to (0,0)."""

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Set terminal window title."""


# ─────────────────────────────────────────────────────────────────────────────
# ProcessTerminal
# ─────────────────────────────────────────────────────────────────────────────

class ProcessTerminal(Terminal):
    """
    Real terminal using sys.stdout and ANSI escape sequences.

    Set CONSOLE_GUI_WRITE_LOG to a file path to append every write to it.
    """

    def __init__(self) -> None:
        self._write_log_path = os.environ.get("CONSOLE_GUI_WRITE_LOG", "")
        self._colors: tuple[Color, Color] | None = None

    def start(self, columns: int, rows: int) -> None:
        # xterm window resize; terminals that don't support it ignore it
        self._emit(f"\x1b[8;{rows};{columns}t")
        self.hide_cursor()

    def stop(self) -> None:
        self._emit(SGR_RESET)
        self._colors = None
        self.show_cursor()
        self._emit("\r\n")

    def write(self, data: str) -> None:
        self._emit(data)

    def move_to(self, x: int, y: int) -> None:
        self._emit(f"\x1b[{y + 1};{x + 1}H")

    def set_colors(self, bg: Color, fg: Color) -> None:
        if self._colors == (bg, fg):
            return
        self._colors = (bg, fg)
        self._emit(sgr(bg, fg))

    def hide_cursor(self) -> None:
        self._emit("\x1b[?25l")

    def show_cursor(self) -> None:
        self._emit("\x1b[?25h")

    def clear_screen(self) -> None:
        self._emit("\x1b[2J\x1b[H")

    def set_title(self, title: str) -> None:
        self._emit(f"\x1b]0;{title}\x07")

    def _emit(self, data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                pass
