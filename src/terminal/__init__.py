"""
Terminal front end for Minesweeper.

Curses rendering, keyboard input and the application bootstrap.
"""
from .app import play, TerminalTooSmallError
from .keys import KEY_BINDINGS, key_actions
from .renderer import (
    CellRenderer,
    ColorCellRenderer,
    CursesSurface,
    PlainCellRenderer,
    Style,
    cell_glyph,
    choose_renderer,
    required_size,
)

__all__ = [
    "play",
    "TerminalTooSmallError",
    "KEY_BINDINGS",
    "key_actions",
    "CellRenderer",
    "ColorCellRenderer",
    "CursesSurface",
    "PlainCellRenderer",
    "Style",
    "cell_glyph",
    "choose_renderer",
    "required_size",
]
