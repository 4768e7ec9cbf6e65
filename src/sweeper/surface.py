"""
Rendering surface interface.

The session hands a Snapshot to whatever draws the game. Snapshots are
copies, so a surface can hold on to one without seeing later moves.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .grid import GridModel
from .rules import GameState


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    Everything a surface needs to draw one frame.

    Attributes:
        grid: Mine layout.
        visibility: Copy of per-cell CellState values.
        cursor: Selected (x, y) position.
        flagged_count: Number of flagged cells.
        game_state: Current outcome.
        elapsed_seconds: Whole seconds since the first action.
        exploded: Index of the mine that ended the game, if any.
    """

    grid: GridModel
    visibility: np.ndarray
    cursor: Tuple[int, int]
    flagged_count: int
    game_state: GameState
    elapsed_seconds: int
    exploded: Optional[int] = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def mines_remaining(self) -> int:
        """Mines left unaccounted for by flags. Negative if over-flagged."""
        return self.grid.mine_count - self.flagged_count

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.game_state != GameState.PLAYING

    def cell(self, x: int, y: int) -> Cell:
        """Get the Cell at (x, y)."""
        index = self.grid.index_of(x, y)
        return self.grid.cell(index, CellState(int(self.visibility[index])))

    def is_selected(self, x: int, y: int) -> bool:
        """Check if (x, y) is under the cursor."""
        return (x, y) == self.cursor

    def observation(self) -> np.ndarray:
        """
        Get the player-visible board as a numpy array.

        Returns:
            2D int8 array of shape (height, width) using Cell.to_observation
            values.
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for y in range(self.height):
            for x in range(self.width):
                obs[y, x] = self.cell(x, y).to_observation()
        return obs


# ============================================================================
# Surface Interface
# ============================================================================

class RenderSurface(ABC):
    """Draws snapshots and collects acknowledgement of finished games."""

    @abstractmethod
    def render(self, snapshot: Snapshot) -> None:
        """Draw a game in progress."""

    @abstractmethod
    def acknowledge(self, snapshot: Snapshot) -> bool:
        """
        Show a finished game and wait for the player.

        Args:
            snapshot: Final state of the game.

        Returns:
            True to start a new game, False to quit.
        """
