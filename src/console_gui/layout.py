"""
Text layout — greedy word wrap into fixed-width lines.

Provides:
- wrap_text(): split text into lines of exactly ``width`` characters
- split_line(): break a single over-long line

Break preference for a line longer than ``width``: after the right-most
hyphen before column ``width``; else at the right-most space up to and
including column ``width`` (the space is dropped); else a hard break at
``width``. A hard break never drops a character.
"""
from __future__ import annotations

import re

_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


def _find_break(line: str, width: int) -> tuple[int, int]:
    """Return ``(end, resume)``: the kept slice end and where the remainder starts."""
    hyphen = line.rfind("-", 0, width)
    if hyphen >= 0:
        return hyphen + 1, hyphen + 1
    space = line.rfind(" ", 0, width + 1)
    if space >= 0:
        return space, space + 1
    return width, width


def split_line(line: str, width: int) -> list[str]:
    """Break one newline-free line into padded lines of *width* characters."""
    lines: list[str] = []
    while len(line) > width:
        end, resume = _find_break(line, width)
        lines.append(line[:end].ljust(width))
        line = line[resume:]
    lines.append(line.ljust(width))
    return lines


def wrap_text(text: str, width: int, trim_trailing_newlines: bool = True) -> list[str]:
    """
    Lay *text* out as lines of exactly *width* characters.

    Tabs become single spaces and every newline variant starts a new line.
    Empty or whitespace-only text gives one blank line.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")

    if not text or text.isspace():
        return [" " * width]

    text = text.replace("\t", " ")
    if trim_trailing_newlines:
        text = text.rstrip("\r\n")

    lines: list[str] = []
    for segment in _NEWLINE_RE.split(text):
        lines.extend(split_line(segment, width))
    return lines
