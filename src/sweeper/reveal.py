"""
Reveal (flood-fill) logic.

Revealing a blank cell uncovers the whole connected blank region and the
numbered cells bordering it. The expansion uses an explicit worklist, so
large open boards never hit the interpreter's recursion limit.
"""
from typing import List

import numpy as np

from .cell import CellState
from .grid import GridModel


def reveal(grid: GridModel, visibility: np.ndarray, index: int) -> List[int]:
    """
    Reveal a cell, cascading through blank neighbours.

    Only HIDDEN cells are revealed: revealed, flagged and unsure cells are
    left alone, both as the target and during the cascade. Revealing a mine
    is not reported here; callers check the grid themselves.

    Args:
        grid: Mine layout.
        visibility: Per-cell CellState values, updated in place.
        index: Linear index of the cell to reveal.

    Returns:
        Indices revealed by this call, target first. Empty if nothing
        changed.
    """
    if visibility[index] != CellState.HIDDEN:
        return []

    visibility[index] = CellState.REVEALED
    revealed = []
    pending = [index]

    while pending:
        current = pending.pop()
        revealed.append(current)
        if grid.mines[current] or grid.adjacent[current] != 0:
            continue
        for neighbor in grid.neighbors(current):
            # Marking before pushing keeps every cell on the worklist once
            if visibility[neighbor] == CellState.HIDDEN:
                visibility[neighbor] = CellState.REVEALED
                pending.append(neighbor)

    return revealed
