"""
Flag toggling.
"""
import numpy as np

from .cell import CellState


def toggle_flag(visibility: np.ndarray, flagged_count: int, index: int) -> int:
    """
    Toggle the flag on a cell.

    HIDDEN becomes FLAGGED and FLAGGED becomes HIDDEN. Any other state is
    left unchanged.

    Args:
        visibility: Per-cell CellState values, updated in place.
        flagged_count: Number of flagged cells before the toggle.
        index: Linear index of the cell.

    Returns:
        Number of flagged cells after the toggle.
    """
    state = visibility[index]
    if state == CellState.HIDDEN:
        visibility[index] = CellState.FLAGGED
        return flagged_count + 1
    if state == CellState.FLAGGED:
        visibility[index] = CellState.HIDDEN
        return flagged_count - 1
    return flagged_count
