"""
Automated Minesweeper players.

Provides agents that play through MinesweeperEnv:
- RandomAgent: Baseline random selection of cursor actions
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
