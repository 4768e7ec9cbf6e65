"""
Cell module for Minesweeper game.

Defines the visibility states a cell can be in and a read-only view
combining a cell's content (mine/number) with its current state.
"""
from enum import IntEnum
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(IntEnum):
    """
    Possible visual states of a cell.

    Integer valued so a whole board of states fits in a numpy array.
    UNSURE exists for completeness; no action currently produces it.
    """

    HIDDEN = 0
    REVEALED = 1
    FLAGGED = 2
    UNSURE = 3


# Observation values shared by the environment and text renderers
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Snapshot of a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Meaningless when is_mine is True.
        state: Visual state at the time the snapshot was taken.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_blank(self) -> bool:
        """Non-mine cell with no mine neighbours."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_observation(self) -> int:
        """
        Convert cell to the value a player is allowed to see.

        Returns:
            -1: Hidden (or unsure) cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.state != CellState.REVEALED:
            return OBS_HIDDEN
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
