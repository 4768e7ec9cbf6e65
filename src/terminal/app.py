"""
Curses application bootstrap.

Sets up the screen, wires the keyboard and renderer to a game session, and
restores the terminal on exit (including on errors).
"""
import curses

from sweeper.config import GameConfig
from sweeper.errors import SweeperError
from sweeper.session import GameSession, SessionStats
from .keys import key_actions
from .renderer import CursesSurface, choose_renderer, required_size


class TerminalTooSmallError(SweeperError):
    """The terminal cannot fit the requested board."""


def play(config: GameConfig) -> SessionStats:
    """
    Play games in the terminal until the player quits.

    Args:
        config: Board size, mine count and color preference.

    Returns:
        Statistics for the games played.
    """
    return curses.wrapper(_play, config)


def _play(screen, config: GameConfig) -> SessionStats:
    check_terminal_size(screen, config)
    screen.keypad(True)
    renderer = choose_renderer(config.color_enabled)
    surface = CursesSurface(screen, renderer)
    session = GameSession(config)
    return session.run(key_actions(screen), surface)


def check_terminal_size(screen, config: GameConfig) -> None:
    """
    Make sure the board fits on screen.

    Raises:
        TerminalTooSmallError: If the window is too small.
    """
    rows, columns = screen.getmaxyx()
    need_rows, need_columns = required_size(config)
    if rows < need_rows or columns < need_columns:
        raise TerminalTooSmallError(
            f"Terminal is {columns}x{rows}, "
            f"board needs at least {need_columns}x{need_rows}"
        )
