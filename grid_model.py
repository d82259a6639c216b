import pandas as pd

from cell_coercion import coerce_cell
from size_resolver import checked_sizes


class GridModel:
    """
    Row-major cell storage plus optional explicit row/column sizes.
    Rows may be ragged; lookups past a row's end yield None.
    Read-only once built.
    """

    def __init__(self, cells=None, col_widths=None, row_heights=None):
        self.cells = tuple(tuple(coerce_cell(v) for v in row) for row in cells or [])
        self.col_widths = checked_sizes(col_widths, "column widths")
        self.row_heights = checked_sizes(row_heights, "row heights")

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, col_widths=None, row_heights=None):
        rows = []
        for values in df.itertuples(index=False, name=None):
            row = [coerce_cell(v) for v in values]
            # trailing empties make the row ragged rather than padded
            while row and row[-1].is_empty:
                row.pop()
            rows.append(row)
        return cls(rows, col_widths=col_widths, row_heights=row_heights)

    @property
    def row_count(self) -> int:
        return len(self.cells)

    def cell_at(self, row: int, col: int):
        if row < 0 or col < 0 or row >= len(self.cells):
            return None
        cells = self.cells[row]
        if col >= len(cells):
            return None
        return cells[col]
