import curses
import re
from dataclasses import dataclass
from typing import NamedTuple

from wcwidth import wcwidth

from column_labels import column_label
from table_cell import EMPTY_CELL

CORNER_MARKER = "**"

# tabs, newlines and other C0/C1 controls move the curses cursor
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


class Viewport(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class Style:
    bold: bool = False
    highlight: bool = False


HEADER_STYLE = Style(bold=True)
HEADER_SELECTED_STYLE = Style(bold=True, highlight=True)
CELL_STYLE = Style()
CELL_SELECTED_STYLE = Style(highlight=True)


class BufferWrite(NamedTuple):
    y: int
    x: int
    text: str
    style: Style


def printable(text: str) -> str:
    return _CONTROL_CHARS.sub(" ", text)


def truncate_to_width(text: str, width: int) -> str:
    """Longest prefix of text that fits in width terminal columns.

    Full-width (CJK) characters take two columns; a wide character that would
    straddle the edge is dropped.
    """
    if text.isascii():
        return text[:width]
    used = 0
    for i, ch in enumerate(text):
        used += max(wcwidth(ch), 0)
        if used > width:
            return text[:i]
    return text


def _emit_cell(writes, viewport, y, x, height, width, text, style):
    """Clear the cell rectangle, then write text on its first line.

    Everything is clipped to the viewport; text is truncated, never wrapped.
    """
    clip_w = min(width, viewport.right - x)
    if clip_w <= 0:
        return
    for line_y in range(y, min(y + height, viewport.bottom)):
        writes.append(BufferWrite(line_y, x, " " * clip_w, style))
    if text and y < viewport.bottom:
        writes.append(BufferWrite(y, x, truncate_to_width(text, clip_w), style))


def render(grid, sizes, selection, viewport):
    """Produce the buffer writes for one redraw; reads its inputs only.

    Logical row 0 and column 0 are headers; grid cell (r, c) sits at logical
    (r + 1, c + 1). The walk stops when the viewport is exhausted, so a small
    grid still fills the screen with headers and empty cells.
    """
    writes = []
    header_w = sizes.default_col_width
    header_h = sizes.default_row_height

    row = 0
    y = viewport.y
    while y < viewport.bottom:
        grid_row = row - 1
        row_h = header_h if row == 0 else sizes.row_height(grid_row)
        col = 0
        x = viewport.x
        while x < viewport.right:
            grid_col = col - 1
            col_w = header_w if col == 0 else sizes.col_width(grid_col)
            if row == 0 and col == 0:
                text, style = CORNER_MARKER, HEADER_STYLE
            elif row == 0:
                text = column_label(grid_col)
                style = HEADER_SELECTED_STYLE if selection.col_in_span(grid_col) else HEADER_STYLE
            elif col == 0:
                text = str(row)
                style = HEADER_SELECTED_STYLE if selection.row_in_span(grid_row) else HEADER_STYLE
            else:
                cell = grid.cell_at(grid_row, grid_col) or EMPTY_CELL
                text = printable(cell.format_string())
                style = CELL_SELECTED_STYLE if selection.selected(grid_row, grid_col) else CELL_STYLE
            _emit_cell(writes, viewport, y, x, row_h, col_w, text, style)
            x += col_w
            col += 1
        y += row_h
        row += 1
    return writes


class GridPane:
    PAIR_CELL_TEXT = 1

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
        except curses.error:
            pass

    def attr_for(self, style):
        attr = curses.color_pair(self.PAIR_CELL_TEXT)
        if style.highlight:
            attr |= curses.A_REVERSE
        if style.bold:
            attr |= curses.A_BOLD
        return attr

    # ---------- rendering ----------
    def draw(self, win, state):
        win.erase()
        h, w = win.getmaxyx()
        writes = render(state.grid, state.sizes, state.selection, Viewport(0, 0, w, h))
        # write.text is already clipped to display width; n counts characters
        for write in writes:
            try:
                win.addnstr(write.y, write.x, write.text, len(write.text), self.attr_for(write.style))
            except curses.error:
                # writing the bottom-right cell moves the cursor off-screen
                pass
        win.refresh()
