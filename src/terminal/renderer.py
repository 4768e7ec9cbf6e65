"""
Curses rendering for Minesweeper.

A CursesSurface lays out the board and status lines; a CellRenderer picked
once at startup decides how each glyph is colored (or highlighted, on
terminals without color).
"""
import curses
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional, Tuple

from sweeper.cell import Cell
from sweeper.config import GameConfig
from sweeper.rules import GameState
from sweeper.surface import RenderSurface, Snapshot


# ============================================================================
# Constants
# ============================================================================

GRID_TOP = 2
CELL_WIDTH = 2

TITLE_PLAYING = "Welcome to Minesweeper!"
TITLE_LOST = "You lost ..."
TITLE_WON = "You win!!"
PROMPT_CONTINUE = "Press any key to continue, or 'q' to exit."

QUIT_KEY = ord("q")


class Style(Enum):
    """How a glyph should be drawn."""

    HIDDEN = auto()
    BLANK = auto()
    NUMBER = auto()
    FLAG = auto()
    MINE = auto()
    FLAGGED_MINE = auto()
    EXPLOSION = auto()


# ============================================================================
# Glyphs
# ============================================================================

def cell_glyph(
    cell: Cell, final: bool = False, highlight: bool = False
) -> Tuple[str, Style]:
    """
    Pick the character and style for a cell.

    During play only revealed cells show their content. On the final
    screen every cell is shown, correctly flagged mines stand out, and the
    highlighted cell (the one that exploded) uses the explosion style if
    it is a mine.

    Args:
        cell: Cell to draw.
        final: Whether the game is over.
        highlight: Whether this is the cell the game ended on.

    Returns:
        Tuple of (character, style).
    """
    if not final:
        if cell.is_revealed:
            return _content_glyph(cell)
        if cell.is_flagged:
            return "#", Style.FLAG
        return "#", Style.HIDDEN

    if cell.is_mine:
        if highlight:
            return "*", Style.EXPLOSION
        if cell.is_flagged:
            return "*", Style.FLAGGED_MINE
    return _content_glyph(cell)


def _content_glyph(cell: Cell) -> Tuple[str, Style]:
    if cell.is_mine:
        return "*", Style.MINE
    if cell.adjacent_mines == 0:
        return " ", Style.BLANK
    return str(cell.adjacent_mines), Style.NUMBER


# ============================================================================
# Cell Renderers
# ============================================================================

class CellRenderer(ABC):
    """Maps glyph styles to curses attributes."""

    def setup(self) -> None:
        """Prepare the terminal. Called once after curses starts."""

    @abstractmethod
    def attr(self, style: Style, char: str) -> int:
        """Get the curses attribute for a glyph."""


class PlainCellRenderer(CellRenderer):
    """Monochrome rendering: flags and explosions use standout."""

    def attr(self, style: Style, char: str) -> int:
        if style in (Style.FLAG, Style.FLAGGED_MINE, Style.EXPLOSION):
            return curses.A_STANDOUT
        return curses.A_NORMAL


class ColorCellRenderer(CellRenderer):
    """Colored rendering with a color pair per number and per mine state."""

    PAIR_PLAIN = 1
    PAIR_FLAG = 2
    PAIR_MINE = 3
    PAIR_EXPLOSION = 4
    PAIR_NUMBER_BASE = 10

    NUMBER_COLORS = {
        1: curses.COLOR_BLUE,
        2: curses.COLOR_GREEN,
        3: curses.COLOR_RED,
        4: curses.COLOR_MAGENTA,
        5: curses.COLOR_CYAN,
        6: curses.COLOR_RED,
        7: curses.COLOR_GREEN,
        8: curses.COLOR_MAGENTA,
    }

    def setup(self) -> None:
        curses.start_color()
        background = curses.COLOR_BLACK
        curses.init_pair(self.PAIR_PLAIN, curses.COLOR_WHITE, background)
        curses.init_pair(self.PAIR_FLAG, curses.COLOR_YELLOW, background)
        curses.init_pair(self.PAIR_MINE, curses.COLOR_RED, background)
        curses.init_pair(
            self.PAIR_EXPLOSION, curses.COLOR_WHITE, curses.COLOR_RED
        )
        for number, color in self.NUMBER_COLORS.items():
            curses.init_pair(self.PAIR_NUMBER_BASE + number, color, background)

    def attr(self, style: Style, char: str) -> int:
        return curses.color_pair(self.pair_for(style, char))

    def pair_for(self, style: Style, char: str) -> int:
        """Color pair number for a glyph."""
        if style == Style.NUMBER:
            return self.PAIR_NUMBER_BASE + int(char)
        if style in (Style.FLAG, Style.FLAGGED_MINE):
            return self.PAIR_FLAG
        if style == Style.MINE:
            return self.PAIR_MINE
        if style == Style.EXPLOSION:
            return self.PAIR_EXPLOSION
        return self.PAIR_PLAIN


def choose_renderer(color_enabled: bool) -> CellRenderer:
    """
    Pick and set up the cell renderer for this terminal.

    Must be called after curses has been initialised.
    """
    if color_enabled and curses.has_colors():
        renderer: CellRenderer = ColorCellRenderer()
    else:
        renderer = PlainCellRenderer()
    renderer.setup()
    return renderer


# ============================================================================
# Surface
# ============================================================================

def required_size(config: GameConfig) -> Tuple[int, int]:
    """
    Terminal size needed to draw a board.

    Returns:
        Tuple of (rows, columns).
    """
    rows = GRID_TOP + config.height + 3
    columns = max(CELL_WIDTH * config.width, len(PROMPT_CONTINUE)) + 1
    return rows, columns


class CursesSurface(RenderSurface):
    """
    Draws games on a curses window.

    Layout: a title on the first line, the grid from the third line with
    ">" marking the cursor, then status lines under the grid.
    """

    def __init__(self, window, renderer: CellRenderer) -> None:
        self.window = window
        self.renderer = renderer

    def render(self, snapshot: Snapshot) -> None:
        self.window.erase()
        self.window.addstr(0, 0, TITLE_PLAYING)
        self._draw_grid(snapshot, final=False)
        status_row = GRID_TOP + snapshot.height
        self.window.addstr(
            status_row, 0, f"Mines remaining: {snapshot.mines_remaining:2d}"
        )
        self.window.refresh()

    def acknowledge(self, snapshot: Snapshot) -> bool:
        self.window.erase()
        title = TITLE_WON if snapshot.game_state == GameState.WON else TITLE_LOST
        self.window.addstr(0, 0, title)
        self._draw_grid(snapshot, final=True)
        status_row = GRID_TOP + snapshot.height
        self.window.addstr(
            status_row, 0, f"Time elapsed: {snapshot.elapsed_seconds} seconds"
        )
        self.window.addstr(status_row + 1, 0, PROMPT_CONTINUE)
        self.window.refresh()
        return self.window.getch() != QUIT_KEY

    def _draw_grid(self, snapshot: Snapshot, final: bool) -> None:
        highlight = _highlight_index(snapshot) if final else None
        for y in range(snapshot.height):
            row = GRID_TOP + y
            for x in range(snapshot.width):
                column = x * CELL_WIDTH
                selected = not final and snapshot.is_selected(x, y)
                self.window.addstr(row, column, ">" if selected else " ")
                cell = snapshot.cell(x, y)
                index = snapshot.grid.index_of(x, y)
                char, style = cell_glyph(cell, final, index == highlight)
                self.window.addstr(
                    row, column + 1, char, self.renderer.attr(style, char)
                )


def _highlight_index(snapshot: Snapshot) -> Optional[int]:
    if snapshot.exploded is not None:
        return snapshot.exploded
    return snapshot.grid.index_of(*snapshot.cursor)
