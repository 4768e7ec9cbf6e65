"""
Player actions accepted by a game session.
"""
from enum import IntEnum
from typing import Tuple


class Action(IntEnum):
    """Discrete actions an input source can produce."""

    MOVE_UP = 0
    MOVE_DOWN = 1
    MOVE_LEFT = 2
    MOVE_RIGHT = 3
    TOGGLE_FLAG = 4
    REVEAL = 5
    QUIT = 6

    @property
    def is_move(self) -> bool:
        """Check if action moves the cursor."""
        return self in _MOVE_DELTAS

    @property
    def delta(self) -> Tuple[int, int]:
        """Cursor offset (dx, dy) of a move action, (0, 0) otherwise."""
        return _MOVE_DELTAS.get(self, (0, 0))


_MOVE_DELTAS = {
    Action.MOVE_UP: (0, -1),
    Action.MOVE_DOWN: (0, 1),
    Action.MOVE_LEFT: (-1, 0),
    Action.MOVE_RIGHT: (1, 0),
}
