"""
Grid module for Minesweeper game.

Holds the mine layout and per-cell adjacency counts. A grid is immutable
once generated; starting a new game means generating a new grid.
"""
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import ConfigurationError, GridAllocationError
from .random_source import RandomSource


def max_mines(width: int, height: int) -> int:
    """Largest mine count allowed on a width x height grid."""
    return (width * height) // 2


# ============================================================================
# Grid Model
# ============================================================================

@dataclass(frozen=True, eq=False)
class GridModel:
    """
    Mine layout of one game.

    Cells are addressed by linear index ``y * width + x`` (row-major).

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Number of mines on the grid.
        mines: Boolean array, True where a mine sits.
        adjacent: Mine neighbour count per cell. Only meaningful for
            non-mine cells.
    """

    width: int
    height: int
    mine_count: int
    mines: np.ndarray
    adjacent: np.ndarray

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def generate(
        cls, width: int, height: int, mine_count: int, rng: RandomSource
    ) -> "GridModel":
        """
        Place mines by rejection sampling and count neighbours as we go.

        Each placed mine bumps the count of its non-mine neighbours, so
        no second pass over the grid is needed.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Mines to place, at most half the cells.
            rng: Source of uniform cell indices.

        Returns:
            A freshly generated grid.

        Raises:
            ConfigurationError: If dimensions or mine count are invalid.
            GridAllocationError: If the grid arrays cannot be allocated.
        """
        _check_dimensions(width, height)
        limit = max_mines(width, height)
        if mine_count < 1 or mine_count > limit:
            raise ConfigurationError(
                f"Mine count {mine_count} out of range (1-{limit})"
            )

        mines, adjacent = _allocate(width * height)
        grid = cls(width, height, mine_count, mines, adjacent)

        placed = 0
        while placed < mine_count:
            index = rng.uniform(grid.cell_count)
            if mines[index]:
                continue
            mines[index] = True
            for neighbor in grid.neighbors(index):
                if not mines[neighbor]:
                    adjacent[neighbor] += 1
            placed += 1

        return grid

    @classmethod
    def from_mines(
        cls, width: int, height: int, mine_indices: Iterable[int]
    ) -> "GridModel":
        """
        Build a grid with mines at the given indices.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_indices: Linear indices of the mines.

        Returns:
            Grid with adjacency counts computed from the layout.
        """
        _check_dimensions(width, height)
        mines, adjacent = _allocate(width * height)
        for index in mine_indices:
            if not 0 <= index < width * height:
                raise ConfigurationError(f"Mine index {index} out of range")
            mines[index] = True

        grid = cls(width, height, int(mines.sum()), mines, adjacent)
        for index in range(grid.cell_count):
            if not mines[index]:
                adjacent[index] = sum(
                    1 for neighbor in grid.neighbors(index) if mines[neighbor]
                )
        return grid

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def safe_cell_count(self) -> int:
        """Number of cells without a mine."""
        return self.cell_count - self.mine_count

    def index_of(self, x: int, y: int) -> int:
        """Convert (x, y) to a linear index."""
        return y * self.width + x

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert a linear index to (x, y)."""
        return index % self.width, index // self.width

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, index: int) -> List[int]:
        """
        Get indices of the up to 8 cells around a cell.

        Edge and corner cells have fewer neighbours; the grid never wraps.
        """
        x, y = self.position_of(index)
        result = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    result.append(self.index_of(new_x, new_y))
        return result

    # ========================================================================
    # Accessors
    # ========================================================================

    def is_mine(self, index: int) -> bool:
        return bool(self.mines[index])

    def adjacent_mines(self, index: int) -> int:
        return int(self.adjacent[index])

    def cell(self, index: int, state: CellState = CellState.HIDDEN) -> Cell:
        """Get a Cell view of the given index in the given state."""
        return Cell(
            is_mine=self.is_mine(index),
            adjacent_mines=self.adjacent_mines(index),
            state=CellState(state),
        )

    def new_visibility(self) -> np.ndarray:
        """Fresh visibility array with every cell hidden."""
        try:
            return np.full(self.cell_count, CellState.HIDDEN, dtype=np.int8)
        except MemoryError as exc:
            raise GridAllocationError("Memory allocation failed") from exc


# ============================================================================
# Helpers
# ============================================================================

def _check_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ConfigurationError("Grid dimensions must be positive")


def _allocate(size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Allocate zeroed mine and adjacency arrays."""
    try:
        return np.zeros(size, dtype=bool), np.zeros(size, dtype=np.int8)
    except MemoryError as exc:
        raise GridAllocationError("Memory allocation failed") from exc
