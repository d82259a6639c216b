import json
import logging
import os

from size_resolver import DEFAULT_COL_WIDTH, DEFAULT_ROW_HEIGHT

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "visp")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "visp.log")

# default settings
INPUT_TIMEOUT_MS_DEFAULT = 1000
LOG_LEVEL_DEFAULT = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _size_list(value):
    if isinstance(value, list) and all(_positive_int(v) for v in value):
        return list(value)
    return None


def load_config():
    cfg = {
        "DEFAULT_COL_WIDTH": DEFAULT_COL_WIDTH,
        "DEFAULT_ROW_HEIGHT": DEFAULT_ROW_HEIGHT,
        "COL_WIDTHS": None,
        "ROW_HEIGHTS": None,
        "INPUT_TIMEOUT_MS": INPUT_TIMEOUT_MS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_JSON, e)
        return cfg

    if not isinstance(data, dict):
        return cfg

    grid = data.get("grid")
    if isinstance(grid, dict):
        if _positive_int(grid.get("default_col_width")):
            cfg["DEFAULT_COL_WIDTH"] = grid["default_col_width"]
        if _positive_int(grid.get("default_row_height")):
            cfg["DEFAULT_ROW_HEIGHT"] = grid["default_row_height"]
        cfg["COL_WIDTHS"] = _size_list(grid.get("col_widths"))
        cfg["ROW_HEIGHTS"] = _size_list(grid.get("row_heights"))

    if _positive_int(data.get("input_timeout_ms")):
        cfg["INPUT_TIMEOUT_MS"] = data["input_timeout_ms"]

    level = data.get("log_level")
    if isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int):
        cfg["LOG_LEVEL"] = level.upper()

    return cfg


def setup_logging(level=LOG_LEVEL_DEFAULT, log_path=None):
    """Route all logging to a file; the terminal belongs to curses."""
    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        if getattr(handler, "_visp", False):
            root.removeHandler(handler)
            handler.close()
    handler = logging.FileHandler(log_path or LOG_PATH, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._visp = True
    root.addHandler(handler)
    return handler
