"""Error types raised by the drawing primitives and panel factories."""
from __future__ import annotations


class GuiError(Exception):
    """Base class for toolkit errors."""


class GeometryBoundsError(GuiError, ValueError):
    """A drawing primitive's origin, extent or minimum size is out of bounds."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"'{argument}': {message}")
        self.argument = argument


class PanelBoundsError(GuiError, ValueError):
    """A panel's region would not fit inside the grid."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"'{argument}': {message}")
        self.argument = argument
