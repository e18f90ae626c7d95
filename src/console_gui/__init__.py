"""
console_gui — character-cell terminal UI toolkit.

Box-drawing primitives, wrapped and scrollable text panels, and panel groups
sharing one focus pointer, all drawn into a fixed-size screen grid.
"""
from .borders import box_edges, horizontal_line, vertical_line, zigzag_column, zigzag_line
from .canvas import Canvas
from .colors import Color
from .config import GuiConfig
from .context import GuiContext
from .controls import GroupControls
from .errors import GeometryBoundsError, GuiError, PanelBoundsError
from .focus import FocusRegistry
from .glyphs import BorderStyle, Corner, CornerStyle, EdgeStyle, Junction
from .group import PanelGroup
from .gui import GUI
from .keybindings import DEFAULT_GUI_KEYBINDINGS, GuiAction, GuiKeybindingsManager
from .keys import KEY, matches_key, parse_key
from .layout import wrap_text
from .log_box import LogBox
from .panel import Interactivity, Panel, scrollbar_thumb_row
from .reveal import InstantReveal, RevealStrategy, TypewriterReveal
from .screen import Cell, ScreenBuffer
from .terminal import ProcessTerminal, Terminal

__all__ = [
    # borders
    "box_edges",
    "horizontal_line",
    "vertical_line",
    "zigzag_column",
    "zigzag_line",
    # canvas
    "Canvas",
    # colors / config
    "Color",
    "GuiConfig",
    "GuiContext",
    # controls
    "GroupControls",
    # errors
    "GeometryBoundsError",
    "GuiError",
    "PanelBoundsError",
    # focus
    "FocusRegistry",
    # glyphs
    "BorderStyle",
    "Corner",
    "CornerStyle",
    "EdgeStyle",
    "Junction",
    # panels
    "Interactivity",
    "LogBox",
    "Panel",
    "PanelGroup",
    "scrollbar_thumb_row",
    # gui
    "GUI",
    # keybindings / keys
    "DEFAULT_GUI_KEYBINDINGS",
    "GuiAction",
    "GuiKeybindingsManager",
    "KEY",
    "matches_key",
    "parse_key",
    # layout
    "wrap_text",
    # reveal
    "InstantReveal",
    "RevealStrategy",
    "TypewriterReveal",
    # screen / terminal
    "Cell",
    "ScreenBuffer",
    "ProcessTerminal",
    "Terminal",
]
