import string

ALPHABET = string.ascii_uppercase
BASE = len(ALPHABET)


def column_label(index: int) -> str:
    """Spreadsheet column name for a zero-based index: 0 -> A, 26 -> AA.

    Bijective base-26, so there is no zero digit and no "A0" style ambiguity.
    """
    if index < 0:
        raise ValueError(f"column index must be non-negative, got {index}")
    letters = []
    n = index
    while n >= BASE:
        front = n // BASE
        letters.append(ALPHABET[n - BASE * front])
        n = front - 1
    letters.append(ALPHABET[n])
    return "".join(reversed(letters))


def column_index(label: str) -> int:
    """Inverse of column_label (case-insensitive)."""
    if not label or not label.isalpha() or not label.isascii():
        raise ValueError(f"invalid column label: {label!r}")
    n = 0
    for ch in label.upper():
        n = n * BASE + (ALPHABET.index(ch) + 1)
    return n - 1


def cell_reference(row: int, col: int) -> str:
    return f"{column_label(col)}{row + 1}"


def range_reference(selection) -> str:
    start = cell_reference(selection.row, selection.col)
    if selection.rows == 1 and selection.cols == 1:
        return start
    end = cell_reference(
        selection.row + selection.rows - 1, selection.col + selection.cols - 1
    )
    return f"{start}:{end}"
