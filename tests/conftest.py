"""Shared fixtures: a recording terminal and GUI instances built on it."""
from __future__ import annotations

import pytest

from console_gui.colors import Color
from console_gui.config import GuiConfig
from console_gui.gui import GUI
from console_gui.reveal import InstantReveal
from console_gui.terminal import Terminal


class MockTerminal(Terminal):
    """Terminal that records everything instead of touching stdout."""

    def __init__(self) -> None:
        self._output: list[str] = []
        self.moves: list[tuple[int, int]] = []
        self.colors: tuple[Color, Color] | None = None
        self.title: str | None = None
        self.started: tuple[int, int] | None = None
        self.stopped = False
        self.cursor_visible = True
        self.clears = 0

    def start(self, columns: int, rows: int) -> None:
        self.started = (columns, rows)

    def stop(self) -> None:
        self.stopped = True

    def write(self, data: str) -> None:
        self._output.append(data)

    def move_to(self, x: int, y: int) -> None:
        self.moves.append((x, y))

    def set_colors(self, bg: Color, fg: Color) -> None:
        self.colors = (bg, fg)

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def clear_screen(self) -> None:
        self.clears += 1

    def set_title(self, title: str) -> None:
        self.title = title

    @property
    def writes(self) -> int:
        return len(self._output)

    def get_output(self) -> str:
        return "".join(self._output)

    def clear_output(self) -> None:
        self._output.clear()


@pytest.fixture
def terminal() -> MockTerminal:
    return MockTerminal()


@pytest.fixture
def gui(terminal: MockTerminal) -> GUI:
    """Default 128x48 grid, instant reveal."""
    return GUI(GuiConfig(title="Test"), terminal=terminal, reveal=InstantReveal())


@pytest.fixture
def small_gui(terminal: MockTerminal) -> GUI:
    """A 40x12 grid, instant reveal."""
    return GUI(GuiConfig(width=40, height=12), terminal=terminal, reveal=InstantReveal())
