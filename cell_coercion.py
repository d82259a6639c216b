import numbers

import numpy as np
import pandas as pd

from table_cell import EMPTY_CELL, TableCell


def coerce_cell(value):
    """Turn a raw scalar (python, numpy or pandas) into a TableCell."""
    if isinstance(value, TableCell):
        return value
    if value is None:
        return EMPTY_CELL
    try:
        if pd.isna(value):
            return EMPTY_CELL
    except (TypeError, ValueError):
        # list-like values are not scalars; fall through to text
        pass

    if isinstance(value, (bool, np.bool_)):
        return TableCell.text(str(bool(value)))
    if isinstance(value, (numbers.Integral, np.integer)):
        return TableCell.number(int(value))
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return TableCell.number(int(value))

    return TableCell.text(str(value))
