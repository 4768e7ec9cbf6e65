"""
Minesweeper game module.

Provides the game-state engine: grid generation, reveal and flag logic,
win/loss rules and the session that drives them.
"""
from .actions import Action
from .cell import Cell, CellState
from .config import GameConfig, Difficulty, EASY, MEDIUM, HARD, resolve_config
from .errors import SweeperError, ConfigurationError, GridAllocationError
from .flags import toggle_flag
from .grid import GridModel, max_mines
from .random_source import RandomSource, NumpyRandomSource
from .reveal import reveal
from .rules import GameState, evaluate_win, is_loss
from .session import GameSession, SessionState, SessionStats
from .surface import RenderSurface, Snapshot
from .environment import MinesweeperEnv

__all__ = [
    "Action",
    "Cell",
    "CellState",
    "GameConfig",
    "Difficulty",
    "EASY",
    "MEDIUM",
    "HARD",
    "resolve_config",
    "SweeperError",
    "ConfigurationError",
    "GridAllocationError",
    "toggle_flag",
    "GridModel",
    "max_mines",
    "RandomSource",
    "NumpyRandomSource",
    "reveal",
    "GameState",
    "evaluate_win",
    "is_loss",
    "GameSession",
    "SessionState",
    "SessionStats",
    "RenderSurface",
    "Snapshot",
    "MinesweeperEnv",
]
