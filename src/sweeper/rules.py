"""
Win and loss conditions.
"""
from enum import Enum, auto

import numpy as np

from .cell import CellState
from .grid import GridModel


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


def evaluate_win(grid: GridModel, visibility: np.ndarray) -> bool:
    """Check if every non-mine cell is revealed."""
    safe = ~grid.mines
    return bool(np.all(visibility[safe] == CellState.REVEALED))


def is_loss(grid: GridModel, visibility: np.ndarray) -> bool:
    """Check if any mine has been revealed."""
    return bool(np.any(visibility[grid.mines] == CellState.REVEALED))
