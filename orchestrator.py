import curses
import logging

from config_paths import INPUT_TIMEOUT_MS_DEFAULT
from grid_pane import GridPane
from key_bindings import command_for_key
from screen_layout import ScreenLayout
from status_bar import render_status

logger = logging.getLogger(__name__)


class Orchestrator:
    """Owns the loop: draw, wait for one key, apply one command, repeat."""

    def __init__(self, stdscr, app_state, input_timeout_ms=INPUT_TIMEOUT_MS_DEFAULT):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.nodelay(False)
        # bounded wait; a timeout just redraws
        self.stdscr.timeout(input_timeout_ms)
        self.stdscr.keypad(True)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()

    # ---------------- UI ----------------

    def redraw(self):
        self.grid.draw(self.layout.table_win, self.state)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {"mode": self.state.mode, "selection": self.state.selection}, w
        )
        try:
            sw.addnstr(0, 0, text, max(0, w - 1))
        except curses.error:
            pass
        sw.refresh()

    def _handle_resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)

    # ---------------- loop ----------------

    def handle_key(self, key) -> bool:
        if key == curses.KEY_RESIZE:
            self._handle_resize()
            return True
        command = command_for_key(key)
        if command is None:
            return True
        return self.state.apply(command)

    def run(self):
        logger.info("starting; grid has %d rows", self.state.grid.row_count)
        while True:
            self.redraw()
            key = self.stdscr.getch()
            if key == -1:
                continue
            if not self.handle_key(key):
                logger.info("quit requested")
                break
