"""
Unit tests for flag toggling.
"""
import pytest

from sweeper import CellState, GridModel, toggle_flag


class TestToggleFlag:
    """Test the hidden/flagged state machine."""

    def test_flag_hidden_cell(self, small_grid: GridModel) -> None:
        """Hidden cell becomes flagged and the count goes up by one."""
        visibility = small_grid.new_visibility()
        assert toggle_flag(visibility, 0, 4) == 1
        assert visibility[4] == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, small_grid: GridModel) -> None:
        """Toggling twice restores the original state and count."""
        visibility = small_grid.new_visibility()
        count = toggle_flag(visibility, 0, 4)
        count = toggle_flag(visibility, count, 4)
        assert count == 0
        assert visibility[4] == CellState.HIDDEN

    @pytest.mark.parametrize("state", [CellState.REVEALED, CellState.UNSURE])
    def test_other_states_unchanged(
        self, small_grid: GridModel, state: CellState
    ) -> None:
        """Only hidden and flagged cells take part in toggling."""
        visibility = small_grid.new_visibility()
        visibility[4] = state
        assert toggle_flag(visibility, 3, 4) == 3
        assert visibility[4] == state

    def test_count_matches_flagged_cells(self, small_grid: GridModel) -> None:
        """Counter stays equal to the number of flagged cells."""
        visibility = small_grid.new_visibility()
        count = 0
        for index in (0, 1, 2, 1, 5):
            count = toggle_flag(visibility, count, index)
        assert count == int((visibility == CellState.FLAGGED).sum()) == 3
