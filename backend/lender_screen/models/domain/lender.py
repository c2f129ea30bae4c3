"""Lender record domain model built from one row of the lender table."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

LENDER_NAME = "Lender Name"
POS_MIN = "pos_min"
POS_MAX = "pos_max"
TIER = "Tier"
STATE_RESTRICTIONS = "State_Restrictions"
PROHIBITED_INDUSTRIES = "Prohibited_Industries"
OTHER_KEY_REQUIREMENTS = "Other_Key_Requirements"
MIN_TIB_MONTHS = "Min_TIB_Months"
MIN_MONTHLY_REVENUE = "Min_Monthly_Revenue"
MIN_FICO = "Min_FICO"


def format_number(value: float) -> str:
    """Render a number the way it appeared in the sheet ("4", not "4.0")."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class NumberCell:
    """Cell whose trimmed content parsed as a finite decimal number."""

    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class TextCell:
    """Cell holding trimmed free text (possibly empty)."""

    value: str

    def __str__(self) -> str:
        return self.value


Cell = Union[NumberCell, TextCell]


@dataclass(frozen=True)
class LenderRecord:
    """
    One row of the lender table.

    Cells are keyed by header name in header order and are read-only once
    the record is built.

    Attributes:
        cells: Mapping of column name to a NumberCell or TextCell
    """

    cells: Mapping[str, Cell] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze the cell mapping."""
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    @classmethod
    def from_values(cls, values: Mapping[str, Union[float, int, str]]) -> "LenderRecord":
        """
        Build a record from plain Python values.

        Numbers become NumberCells, everything else is stored as stripped text.
        """
        cells: dict[str, Cell] = {}
        for column, value in values.items():
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                cells[column] = NumberCell(float(value))
            else:
                cells[column] = TextCell(str(value).strip())
        return cls(cells)

    def get(self, column: str) -> Optional[Cell]:
        return self.cells.get(column)

    def number(self, column: str) -> Optional[float]:
        """
        Get a numeric cell value.

        Returns:
            The value for a NumberCell, None for text or missing cells
        """
        cell = self.cells.get(column)
        if isinstance(cell, NumberCell):
            return cell.value
        return None

    def text(self, column: str) -> str:
        """Get a cell rendered as text, empty string when missing."""
        cell = self.cells.get(column)
        if cell is None:
            return ""
        return str(cell)

    @property
    def name(self) -> str:
        return self.text(LENDER_NAME).strip()

    def to_dict(self) -> dict[str, Union[float, str]]:
        """Plain column -> value mapping for serialization."""
        return {column: cell.value for column, cell in self.cells.items()}

    def __repr__(self) -> str:
        return f"<LenderRecord(name={self.name!r}, columns={len(self.cells)})>"
