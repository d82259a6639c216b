from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CellKind(Enum):
    EMPTY = "empty"
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class TableCell:
    kind: CellKind = CellKind.EMPTY
    value: Optional[object] = None

    @classmethod
    def text(cls, s: str) -> "TableCell":
        return cls(CellKind.TEXT, str(s))

    @classmethod
    def number(cls, n: int) -> "TableCell":
        return cls(CellKind.NUMBER, int(n))

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    def format_string(self) -> str:
        if self.kind is CellKind.TEXT:
            return self.value
        if self.kind is CellKind.NUMBER:
            return f"{self.value}"
        return ""


EMPTY_CELL = TableCell()
