"""
Keyboard input source.

Turns curses key codes into game actions. Unbound keys are ignored.
"""
import curses
from typing import Dict, Iterator

from sweeper.actions import Action


KEY_BINDINGS: Dict[int, Action] = {
    curses.KEY_UP: Action.MOVE_UP,
    curses.KEY_DOWN: Action.MOVE_DOWN,
    curses.KEY_LEFT: Action.MOVE_LEFT,
    curses.KEY_RIGHT: Action.MOVE_RIGHT,
    ord("f"): Action.TOGGLE_FLAG,
    ord("c"): Action.REVEAL,
    ord(" "): Action.REVEAL,
    ord("\n"): Action.REVEAL,
    curses.KEY_ENTER: Action.REVEAL,
    ord("q"): Action.QUIT,
}


def key_actions(window) -> Iterator[Action]:
    """
    Yield an action for every bound key pressed, forever.

    Args:
        window: Curses window to read keys from (keypad mode enabled).
    """
    while True:
        action = KEY_BINDINGS.get(window.getch())
        if action is not None:
            yield action
