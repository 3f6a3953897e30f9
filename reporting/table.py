"""Bordered, right-aligned text tables for the command line."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Sequence, Tuple

from reporting.formatting import format_decimal

LEFT_BORDER = "| "
RIGHT_BORDER = " |"
COL_DIVIDER = " | "
INDEX_HEADER = "#"


@dataclass(frozen=True)
class Column:
    """A named column of display strings."""

    name: str
    data: Tuple[str, ...]
    width: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))
        object.__setattr__(
            self, "width", max([len(self.name), *(len(s) for s in self.data)])
        )

    @classmethod
    def from_strings(cls, name: str, data: Sequence[str]) -> "Column":
        return cls(name, tuple(data))

    @classmethod
    def from_decimals(cls, name: str, data: Sequence[Decimal]) -> "Column":
        return cls(name, tuple(format_decimal(d) for d in data))


class Table:
    """Columns sharing a row count, drawn behind a 1-based ``#`` index column."""

    def __init__(self, columns: Sequence[Column]):
        if not columns:
            raise ValueError("a table needs at least one column")
        rows = len(columns[0].data)
        if any(len(c.data) != rows for c in columns):
            raise ValueError("all columns must have the same number of rows")

        index = Column.from_strings(INDEX_HEADER, [str(i) for i in range(1, rows + 1)])
        self._columns: Tuple[Column, ...] = (index, *columns)
        self._rows = rows
        self._width = (
            sum(c.width for c in self._columns)
            + len(LEFT_BORDER)
            + len(RIGHT_BORDER)
            + len(COL_DIVIDER) * (len(self._columns) - 1)
        )

    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._columns

    @property
    def width(self) -> int:
        return self._width

    def draw(self) -> str:
        divider = "-" * self._width
        lines: List[str] = [divider, self._line([c.name for c in self._columns]), divider]
        for row in range(self._rows):
            lines.append(self._line([c.data[row] for c in self._columns]))
        lines.append(divider)
        return "".join(line + "\n" for line in lines)

    def _line(self, cells: Sequence[str]) -> str:
        padded = (cell.rjust(col.width) for cell, col in zip(cells, self._columns))
        return LEFT_BORDER + COL_DIVIDER.join(padded) + RIGHT_BORDER
