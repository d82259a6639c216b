DEFAULT_ROW_HEIGHT = 1
DEFAULT_COL_WIDTH = 4


def checked_sizes(sizes, what):
    checked = []
    for size in sizes or []:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"{what} must be positive integers, got {size!r}")
        checked.append(size)
    return tuple(checked)


class SizeResolver:
    """Explicit per-index sizes with a fixed fallback for everything past them.

    Indices are unbounded: asking for row 10_000 of a three-row grid is fine
    and simply yields the default.
    """

    def __init__(
        self,
        col_widths=None,
        row_heights=None,
        default_col_width: int = DEFAULT_COL_WIDTH,
        default_row_height: int = DEFAULT_ROW_HEIGHT,
    ):
        self.col_widths = checked_sizes(col_widths, "column widths")
        self.row_heights = checked_sizes(row_heights, "row heights")
        self.default_col_width, self.default_row_height = checked_sizes(
            [default_col_width, default_row_height], "default sizes"
        )

    @classmethod
    def for_grid(cls, grid, default_col_width=DEFAULT_COL_WIDTH, default_row_height=DEFAULT_ROW_HEIGHT):
        return cls(
            grid.col_widths,
            grid.row_heights,
            default_col_width=default_col_width,
            default_row_height=default_row_height,
        )

    def row_height(self, index: int) -> int:
        if 0 <= index < len(self.row_heights):
            return self.row_heights[index]
        return self.default_row_height

    def col_width(self, index: int) -> int:
        if 0 <= index < len(self.col_widths):
            return self.col_widths[index]
        return self.default_col_width
