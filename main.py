import curses
import logging
import os
import sys

from app_state import AppState
from config_paths import ensure_config_dirs, load_config, setup_logging
from default_grid_initializer import DefaultGridInitializer
from size_resolver import SizeResolver

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

__version__ = "0.1.0"

USAGE = (
    "visp - vi-style terminal spreadsheet\n\n"
    "Usage:\n  visp\n  visp -v\n  visp -h\n\n"
    "Keys:\n"
    "  h j k l / arrows   move (NORMAL) or resize selection (VISUAL)\n"
    "  v                  visual mode\n"
    "  Esc                back to normal mode\n"
    "  q                  quit\n"
)


def build_state(cfg):
    grid = DefaultGridInitializer().create(
        col_widths=cfg["COL_WIDTHS"], row_heights=cfg["ROW_HEIGHTS"]
    )
    sizes = SizeResolver.for_grid(
        grid,
        default_col_width=cfg["DEFAULT_COL_WIDTH"],
        default_row_height=cfg["DEFAULT_ROW_HEIGHT"],
    )
    return AppState(grid, sizes)


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    ensure_config_dirs()
    # handler first so config warnings land in the log file
    setup_logging()
    cfg = load_config()
    logging.getLogger().setLevel(cfg["LOG_LEVEL"])
    state = build_state(cfg)

    def curses_main(stdscr):
        Orchestrator(stdscr, state, input_timeout_ms=cfg["INPUT_TIMEOUT_MS"]).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
