"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game session to automated players through the same cursor
actions a person uses at the keyboard.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .actions import Action
from .cell import CellState, OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from .config import GameConfig
from .random_source import NumpyRandomSource
from .rules import GameState
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        Dict with:
        - board: 2D array where -1 = hidden, -2 = flagged,
          0-8 = revealed count, 9 = revealed mine
        - cursor: (x, y) of the selected cell

    Actions:
        Discrete(7), one per Action member.

    Rewards:
        - +1 for a reveal that uncovers cells
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a reveal or flag that changes nothing
        - 0 for cursor moves
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.session: Optional[GameSession] = None

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=OBS_FLAGGED,
                    high=OBS_MINE,
                    shape=(self.config.height, self.config.width),
                    dtype=np.int8,
                ),
                "cursor": spaces.MultiDiscrete(
                    [self.config.width, self.config.height]
                ),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = GameSession(
            self.config, NumpyRandomSource(self.np_random)
        )
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, np.ndarray], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Index of an Action member.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.session is None:
            raise RuntimeError("Call reset() before step()")

        action = Action(int(action))
        self._steps += 1

        reward = self._calculate_reward(action)
        terminated = not self.session.is_playing
        truncated = self.session.finished

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, action: Action) -> float:
        """Apply the action and score its result."""
        changed = self.session.dispatch(action)

        if action == Action.QUIT or action.is_move:
            return 0.0
        if self.session.game_state == GameState.WON:
            return 10.0
        if self.session.game_state == GameState.LOST:
            return -10.0
        if not changed:
            return -0.1
        if action == Action.REVEAL:
            return 1.0
        return 0.0

    def _get_obs(self) -> Dict[str, np.ndarray]:
        snapshot = self.session.snapshot()
        return {
            "board": snapshot.observation(),
            "cursor": np.array(snapshot.cursor, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        state = self.session.state
        return {
            "steps": self._steps,
            "revealed": state.count(CellState.REVEALED),
            "flagged": state.flagged_count,
            "total_safe": state.grid.safe_cell_count,
            "game_state": state.game_state.name,
            "elapsed": self.session.elapsed_seconds(),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string, cursor cell in brackets."""
        snapshot = self.session.snapshot()
        obs = snapshot.observation()
        lines = []

        for y in range(snapshot.height):
            row_str = ""
            for x in range(snapshot.width):
                val = obs[y, x]
                if val == OBS_HIDDEN:
                    char = "#"
                elif val == OBS_FLAGGED:
                    char = "F"
                elif val == OBS_MINE:
                    char = "*"
                elif val == 0:
                    char = " "
                else:
                    char = str(val)
                if snapshot.is_selected(x, y):
                    row_str += f"[{char}]"
                else:
                    row_str += f" {char} "
            lines.append(row_str)

        lines.append(f"Mines remaining: {snapshot.mines_remaining:2d}")
        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would have an effect.

        QUIT is never included; agents stop through truncation instead.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.session is None or not self.session.is_playing:
            return mask

        state = self.session.state
        x, y = state.cursor
        for action in Action:
            if action.is_move:
                delta_x, delta_y = action.delta
                mask[action] = state.grid.in_bounds(x + delta_x, y + delta_y)

        cell_state = state.visibility[state.cursor_index]
        mask[Action.REVEAL] = cell_state == CellState.HIDDEN
        mask[Action.TOGGLE_FLAG] = cell_state in (
            CellState.HIDDEN, CellState.FLAGGED
        )
        return mask
