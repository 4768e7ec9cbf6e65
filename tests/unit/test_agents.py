"""
Unit tests for automated players.
"""
import numpy as np

from agents import RandomAgent
from sweeper import Action, GameConfig, MinesweeperEnv


def observation(board: np.ndarray, cursor) -> dict:
    return {"board": board, "cursor": np.array(cursor)}


class TestValidActionsFromObs:
    """Test the mask agents derive on their own."""

    def test_hidden_centre(self) -> None:
        """All moves plus flag and reveal are valid on a hidden cell."""
        agent = RandomAgent(9, 9)
        board = np.full((9, 9), -1, dtype=np.int8)
        mask = agent.get_valid_actions_from_obs(observation(board, (4, 4)))
        assert mask.tolist() == [True] * 6 + [False]

    def test_corner_and_revealed(self) -> None:
        """Edges block moves and revealed cells block flag/reveal."""
        agent = RandomAgent(9, 9)
        board = np.full((9, 9), -1, dtype=np.int8)
        board[8, 8] = 2
        mask = agent.get_valid_actions_from_obs(observation(board, (8, 8)))
        assert mask[Action.MOVE_UP] and mask[Action.MOVE_LEFT]
        assert not mask[Action.MOVE_DOWN] and not mask[Action.MOVE_RIGHT]
        assert not mask[Action.REVEAL] and not mask[Action.TOGGLE_FLAG]

    def test_flagged_cell(self) -> None:
        """Flagged cells may only be unflagged."""
        agent = RandomAgent(9, 9)
        board = np.full((9, 9), -1, dtype=np.int8)
        board[0, 0] = -2
        mask = agent.get_valid_actions_from_obs(observation(board, (0, 0)))
        assert mask[Action.TOGGLE_FLAG]
        assert not mask[Action.REVEAL]


class TestRandomAgent:
    """Test random action selection."""

    def test_selects_only_valid_actions(self) -> None:
        """Chosen actions always come from the mask."""
        agent = RandomAgent(9, 9, seed=0)
        mask = np.array([False, True, False, False, False, True, False])
        board = np.full((9, 9), -1, dtype=np.int8)
        for _ in range(50):
            action = agent.select_action(observation(board, (4, 4)), mask)
            assert action in (Action.MOVE_DOWN, Action.REVEAL)

    def test_empty_mask_quits(self) -> None:
        """No valid action means quitting."""
        agent = RandomAgent(9, 9, seed=0)
        board = np.full((9, 9), -1, dtype=np.int8)
        mask = np.zeros(len(Action), dtype=bool)
        assert agent.select_action(observation(board, (0, 0)), mask) == Action.QUIT

    def test_seeded_agents_agree(self) -> None:
        """Same seed, same choices."""
        board = np.full((9, 9), -1, dtype=np.int8)
        obs = observation(board, (4, 4))
        first = RandomAgent(9, 9, seed=3)
        second = RandomAgent(9, 9, seed=3)
        assert [first.select_action(obs) for _ in range(20)] == [
            second.select_action(obs) for _ in range(20)
        ]

    def test_plays_an_episode(self) -> None:
        """Agent can drive the environment until the game ends."""
        env = MinesweeperEnv(GameConfig(9, 9, 10))
        agent = RandomAgent(9, 9, seed=5)
        obs, _ = env.reset(seed=5)
        done = False
        steps = 0
        while not done and steps < 5000:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            steps += 1
        assert done
        assert info["game_state"] in ("WON", "LOST")
