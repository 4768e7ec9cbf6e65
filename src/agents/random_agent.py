"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Dict, Optional

import numpy as np

from sweeper.actions import Action
from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    Wanders the cursor around and flags or reveals whatever it lands on.
    Useful for exercising the environment and as a demo opponent.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: Dict[str, np.ndarray],
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: Dict with "board" and "cursor" entries.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions)[0]

        if len(valid_indices) == 0:
            # Nothing left to do on this board
            return int(Action.QUIT)

        return int(self.rng.choice(valid_indices))
