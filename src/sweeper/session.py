"""
Game session module for Minesweeper.

A GameSession owns the state of the game being played and applies player
actions to it. When a game ends, the session waits for the surface to
acknowledge it and then starts over with a brand new grid.
"""
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

import numpy as np

from .actions import Action
from .cell import Cell, CellState
from .config import GameConfig
from .flags import toggle_flag
from .grid import GridModel
from .random_source import NumpyRandomSource, RandomSource
from .reveal import reveal
from .rules import GameState, evaluate_win
from .surface import RenderSurface, Snapshot


# ============================================================================
# Session State
# ============================================================================

@dataclass(eq=False)
class SessionState:
    """
    State of a single game, from grid generation to its outcome.

    Attributes:
        grid: Mine layout, fixed for the whole game.
        visibility: Per-cell CellState values.
        cursor: Selected (x, y) position, always within the grid.
        flagged_count: Number of cells currently flagged.
        start_time: Clock reading at the first flag or reveal.
        end_time: Clock reading when the game was won or lost.
        game_state: Current outcome.
        exploded: Index of the revealed mine that lost the game.
    """

    grid: GridModel
    visibility: np.ndarray
    cursor: Tuple[int, int]
    flagged_count: int = 0
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    game_state: GameState = GameState.PLAYING
    exploded: Optional[int] = None

    @classmethod
    def new(cls, grid: GridModel) -> "SessionState":
        """Create the starting state for a grid: all hidden, cursor centred."""
        return cls(
            grid=grid,
            visibility=grid.new_visibility(),
            cursor=(grid.width // 2, grid.height // 2),
        )

    @property
    def cursor_index(self) -> int:
        """Linear index of the selected cell."""
        return self.grid.index_of(*self.cursor)

    def cell(self, x: int, y: int) -> Cell:
        """Get the Cell at (x, y)."""
        index = self.grid.index_of(x, y)
        return self.grid.cell(index, CellState(int(self.visibility[index])))

    def count(self, state: CellState) -> int:
        """Count cells in the given state."""
        return int(np.count_nonzero(self.visibility == state))


@dataclass
class SessionStats:
    """Results accumulated over every game played in a session."""

    games_played: int = 0
    wins: int = 0
    losses: int = 0

    def record(self, outcome: GameState) -> None:
        """Record a finished game."""
        self.games_played += 1
        if outcome == GameState.WON:
            self.wins += 1
        elif outcome == GameState.LOST:
            self.losses += 1


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Plays Minesweeper games one after another.

    Actions that do not apply in the current state (moving after a loss,
    acknowledging a game still in progress) return False and change
    nothing.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Start a session with a freshly generated game.

        Args:
            config: Board size and mine count.
            rng: Source for mine placement (default: unseeded numpy).
            clock: Returns the current time in seconds.
        """
        self.config = config
        self.rng = rng or NumpyRandomSource()
        self.clock = clock
        self.stats = SessionStats()
        self.finished = False
        self.state = self._new_state()

    def _new_state(self) -> SessionState:
        grid = GridModel.generate(
            self.config.width,
            self.config.height,
            self.config.mine_count,
            self.rng,
        )
        return SessionState.new(grid)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self.state.game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.state.game_state == GameState.PLAYING

    def elapsed_seconds(self) -> int:
        """Whole seconds since the first flag or reveal of this game."""
        if self.state.start_time is None:
            return 0
        end = self.state.end_time
        if end is None:
            end = self.clock()
        return max(0, int(end - self.state.start_time))

    def snapshot(self) -> Snapshot:
        """Copy of the current state for a rendering surface."""
        return Snapshot(
            grid=self.state.grid,
            visibility=self.state.visibility.copy(),
            cursor=self.state.cursor,
            flagged_count=self.state.flagged_count,
            game_state=self.state.game_state,
            elapsed_seconds=self.elapsed_seconds(),
            exploded=self.state.exploded,
        )

    # ========================================================================
    # Actions
    # ========================================================================

    def move_cursor(self, delta_x: int, delta_y: int) -> bool:
        """
        Move the cursor, stopping at the grid edges.

        Returns:
            True if the game is in progress (even if the cursor was
            already against the edge), False otherwise.
        """
        if not self.is_playing:
            return False
        x, y = self.state.cursor
        grid = self.state.grid
        x = max(0, min(grid.width - 1, x + delta_x))
        y = max(0, min(grid.height - 1, y + delta_y))
        self.state.cursor = (x, y)
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag under the cursor.

        Returns:
            True if the cell's flag changed, False otherwise.
        """
        if not self.is_playing:
            return False
        self._start_timer()
        before = self.state.flagged_count
        self.state.flagged_count = toggle_flag(
            self.state.visibility, before, self.state.cursor_index
        )
        return self.state.flagged_count != before

    def reveal_selected(self) -> bool:
        """
        Reveal the cell under the cursor.

        Revealing a mine loses the game; revealing the last safe cell
        wins it.

        Returns:
            True if any cell was revealed, False otherwise.
        """
        if not self.is_playing:
            return False
        self._start_timer()
        index = self.state.cursor_index
        revealed = reveal(self.state.grid, self.state.visibility, index)
        if not revealed:
            return False

        if self.state.grid.is_mine(index):
            self.state.exploded = index
            self._finish(GameState.LOST)
        elif evaluate_win(self.state.grid, self.state.visibility):
            self._finish(GameState.WON)
        return True

    def check_win(self) -> bool:
        """
        Mark the game won if every safe cell is already revealed.

        Returns:
            True if the game is (now) won.
        """
        if self.is_playing and evaluate_win(
            self.state.grid, self.state.visibility
        ):
            self._finish(GameState.WON)
        return self.state.game_state == GameState.WON

    def acknowledge(self) -> bool:
        """
        Start a new game after a win or loss.

        Returns:
            True if a new game was started, False if the current game is
            still in progress.
        """
        if self.is_playing or self.finished:
            return False
        self.state = self._new_state()
        return True

    def quit(self) -> None:
        """End the session. No further actions are accepted."""
        self.finished = True

    def dispatch(self, action: Action) -> bool:
        """
        Apply an action from an input source.

        Args:
            action: Action to apply.

        Returns:
            Result of the matching action method.
        """
        if self.finished:
            return False
        if action == Action.QUIT:
            self.quit()
            return True
        if action.is_move:
            return self.move_cursor(*action.delta)
        if action == Action.TOGGLE_FLAG:
            return self.toggle_flag()
        if action == Action.REVEAL:
            return self.reveal_selected()
        return False

    # ========================================================================
    # Main Loop
    # ========================================================================

    def run(
        self, actions: Iterable[Action], surface: RenderSurface
    ) -> SessionStats:
        """
        Play games until the player quits.

        Each step checks for a win, draws the board, then applies one
        action. Finished games are shown through surface.acknowledge,
        which decides between a new game and quitting. Running out of
        actions counts as quitting.

        Args:
            actions: Input source, consumed one action per step.
            surface: Where games are drawn.

        Returns:
            Statistics for the games played.
        """
        actions = iter(actions)
        while not self.finished:
            self.check_win()
            if not self.is_playing:
                if surface.acknowledge(self.snapshot()):
                    self.acknowledge()
                else:
                    self.quit()
                continue

            surface.render(self.snapshot())
            self.dispatch(next(actions, Action.QUIT))

        return self.stats

    # ========================================================================
    # Helpers
    # ========================================================================

    def _start_timer(self) -> None:
        if self.state.start_time is None:
            self.state.start_time = self.clock()

    def _finish(self, outcome: GameState) -> None:
        self.state.game_state = outcome
        self.state.end_time = self.clock()
        self.stats.record(outcome)
