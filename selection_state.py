import logging
from enum import Enum

from selection import Selection

logger = logging.getLogger(__name__)


class Mode(Enum):
    NORMAL = "normal"
    VISUAL = "visual"


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ENTER_VISUAL = "enter_visual"
    CANCEL = "cancel"
    QUIT = "quit"


# (d_row, d_col) per directional command
DIRECTIONS = {
    Command.MOVE_UP: (-1, 0),
    Command.MOVE_DOWN: (1, 0),
    Command.MOVE_LEFT: (0, -1),
    Command.MOVE_RIGHT: (0, 1),
}


def apply_command(command, mode, selection):
    """Return the (mode, selection) that results from one command.

    Normal mode: directions move the anchor (saturating at 0) and collapse the
    extent. Visual mode: directions grow (down/right) or shrink (up/left) the
    extent, never below 1, and leave the anchor alone. Quit is not a
    transition and comes back unchanged for the host to act on.
    """
    if command in DIRECTIONS:
        d_row, d_col = DIRECTIONS[command]
        if mode is Mode.VISUAL:
            return mode, selection.resized(d_row, d_col)
        return mode, selection.moved(d_row, d_col)

    if command is Command.ENTER_VISUAL:
        return Mode.VISUAL, selection

    if command is Command.CANCEL:
        return Mode.NORMAL, selection.collapsed()

    return mode, selection


class SelectionStateMachine:
    """Owns the current mode and selection and feeds commands through apply_command."""

    def __init__(self, mode=Mode.NORMAL, selection=None):
        self.mode = mode
        self.selection = selection if selection is not None else Selection()

    def apply(self, command) -> bool:
        """Apply a command; returns False when the host should quit."""
        if command is Command.QUIT:
            return False
        mode, selection = apply_command(command, self.mode, self.selection)
        if mode is not self.mode:
            logger.info("mode %s -> %s", self.mode.value, mode.value)
        logger.debug("%s: %s -> %s", command.value, self.selection, selection)
        self.mode = mode
        self.selection = selection
        return True
