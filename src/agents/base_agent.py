"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all automated players implement.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

import numpy as np

from sweeper.actions import Action
from sweeper.cell import OBS_FLAGGED, OBS_HIDDEN


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents play through the cursor actions of MinesweeperEnv: they see the
    visible board plus the cursor and pick one Action per step.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width

    @abstractmethod
    def select_action(
        self,
        observation: Dict[str, np.ndarray],
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: Dict with "board" and "cursor" entries.
            valid_actions: Optional mask of valid actions.

        Returns:
            Index of an Action member.
        """
        pass

    def get_valid_actions_from_obs(
        self, observation: Dict[str, np.ndarray]
    ) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: Dict with "board" and "cursor" entries.

        Returns:
            Boolean mask where True = valid action. QUIT is never valid.
        """
        board = observation["board"]
        x, y = (int(value) for value in observation["cursor"])
        mask = np.zeros(len(Action), dtype=bool)

        for action in Action:
            if action.is_move:
                delta_x, delta_y = action.delta
                new_x, new_y = x + delta_x, y + delta_y
                mask[action] = (
                    0 <= new_x < self.board_width
                    and 0 <= new_y < self.board_height
                )

        value = board[y, x]
        mask[Action.REVEAL] = value == OBS_HIDDEN
        mask[Action.TOGGLE_FLAG] = value in (OBS_HIDDEN, OBS_FLAGGED)
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
