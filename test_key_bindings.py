import curses

import pytest

from key_bindings import ESC, command_for_key
from selection_state import Command


@pytest.mark.parametrize(
    "key, command",
    [
        (ord("k"), Command.MOVE_UP),
        (curses.KEY_UP, Command.MOVE_UP),
        (ord("j"), Command.MOVE_DOWN),
        (curses.KEY_DOWN, Command.MOVE_DOWN),
        (ord("h"), Command.MOVE_LEFT),
        (curses.KEY_LEFT, Command.MOVE_LEFT),
        (ord("l"), Command.MOVE_RIGHT),
        (curses.KEY_RIGHT, Command.MOVE_RIGHT),
        (ord("v"), Command.ENTER_VISUAL),
        (ESC, Command.CANCEL),
        (ord("q"), Command.QUIT),
    ],
)
def test_key_translation(key, command):
    assert command_for_key(key) is command


@pytest.mark.parametrize("key", [-1, ord("x"), ord("K"), 10])
def test_unbound_keys(key):
    assert command_for_key(key) is None
