"""
Reveal strategies — how the animated range of a panel render is written.

Provides:
- RevealStrategy: interface
- TypewriterReveal: one character at a time with a blocking delay
- InstantReveal: the whole run at once (tests, animation disabled)
"""
from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Callable, Iterator

from .colors import Color
from .screen import ScreenBuffer


class RevealStrategy(ABC):
    @abstractmethod
    def reveal(self, screen: ScreenBuffer, x: int, y: int, text: str,
               bg: Color, fg: Color, delay_ms: int) -> None:
        """Write *text* at (x, y), paced however the strategy sees fit."""


class TypewriterReveal(RevealStrategy):
    """
    Writes one character per step and sleeps *delay_ms* between steps.

    The render blocks for the whole animation. ``steps()`` exposes the same
    sequence as a generator for callers that want to drive it themselves.
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep) -> None:
        self._sleep = sleep

    def steps(self, screen: ScreenBuffer, x: int, y: int, text: str,
              bg: Color, fg: Color) -> Iterator[int]:
        """Write one character per iteration, yielding the column just written."""
        for i, ch in enumerate(text):
            screen.write(x + i, y, ch, bg, fg)
            yield x + i

    def reveal(self, screen: ScreenBuffer, x: int, y: int, text: str,
               bg: Color, fg: Color, delay_ms: int) -> None:
        for _ in self.steps(screen, x, y, text, bg, fg):
            self._sleep(delay_ms / 1000)


class InstantReveal(RevealStrategy):
    def reveal(self, screen: ScreenBuffer, x: int, y: int, text: str,
               bg: Color, fg: Color, delay_ms: int) -> None:
        screen.write(x, y, text, bg, fg)
