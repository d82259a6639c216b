from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Selection:
    """Anchor cell (row, col) plus an extent of rows x cols, both at least 1."""

    row: int = 0
    col: int = 0
    rows: int = 1
    cols: int = 1

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"anchor must be non-negative, got ({self.row}, {self.col})")
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"extent must be at least 1x1, got ({self.rows}, {self.cols})")

    def row_in_span(self, row: int) -> bool:
        return self.row <= row < self.row + self.rows

    def col_in_span(self, col: int) -> bool:
        return self.col <= col < self.col + self.cols

    def selected(self, row: int, col: int) -> bool:
        return self.row_in_span(row) and self.col_in_span(col)

    def moved(self, d_row: int, d_col: int) -> "Selection":
        # moving always collapses to a single cell; saturates at the origin
        return Selection(max(0, self.row + d_row), max(0, self.col + d_col))

    def resized(self, d_rows: int, d_cols: int) -> "Selection":
        return replace(
            self, rows=max(1, self.rows + d_rows), cols=max(1, self.cols + d_cols)
        )

    def collapsed(self) -> "Selection":
        return replace(self, rows=1, cols=1)
