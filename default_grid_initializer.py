import pandas as pd

from grid_model import GridModel


class DefaultGridInitializer:
    COL_WIDTHS = [10, 5]
    ROW_HEIGHTS = [1, 2]

    def create(self, col_widths=None, row_heights=None) -> GridModel:
        df = pd.DataFrame(
            {
                "label": ["Value"] * 4,
                "amount": [10, 20, 20, 20],
                "base": [10, 10, 10, 10],
            }
        )
        return GridModel.from_dataframe(
            df,
            col_widths=self.COL_WIDTHS if col_widths is None else col_widths,
            row_heights=self.ROW_HEIGHTS if row_heights is None else row_heights,
        )
