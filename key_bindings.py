import curses

from selection_state import Command

ESC = 27

KEY_COMMANDS = {
    ord("k"): Command.MOVE_UP,
    curses.KEY_UP: Command.MOVE_UP,
    ord("j"): Command.MOVE_DOWN,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    ord("h"): Command.MOVE_LEFT,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    ord("l"): Command.MOVE_RIGHT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord("v"): Command.ENTER_VISUAL,
    ESC: Command.CANCEL,
    ord("q"): Command.QUIT,
}


def command_for_key(key):
    # -1 is the getch() timeout
    return KEY_COMMANDS.get(key)
