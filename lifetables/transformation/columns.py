"""
Column Detection - Transform Layer

Column order and position differ between pages, so roles are inferred from
sentinel values instead of fixed offsets: the age-0 row is the first row
holding "0" in its age column and the radix "100000" in both survivor
columns (male first, then female).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..coreutils.errors import (
    AmbiguousColumns,
    MissingRowIndexColumn,
    UnpairedSeriesColumn,
)
from .numbers import numeric_text
from .schemas import RADIX

ROW_INDEX_SENTINEL = "0"
SERIES_SENTINEL = str(RADIX)


@dataclass(frozen=True)
class ColumnRoles:
    row_index: int
    male: int
    female: int

    @property
    def max_index(self) -> int:
        return max(self.row_index, self.male, self.female)


def detect_column_roles(cells: Sequence[str]) -> Optional[ColumnRoles]:
    """
    Infer column roles from one row

    Args:
        cells: Cell texts of the row

    Returns:
        Optional[ColumnRoles]: Roles if this row fixes them, None if the row
        holds no series sentinel at all

    Raises:
        AmbiguousColumns: More than two cells hold the series sentinel
        UnpairedSeriesColumn: Only one cell holds the series sentinel
        MissingRowIndexColumn: Series pair found without a row index cell
    """
    row_index: Optional[int] = None
    series_columns: List[int] = []

    for column, cell in enumerate(cells):
        text = numeric_text(cell)
        if text == ROW_INDEX_SENTINEL:
            # Only the first "0" counts
            if row_index is None:
                row_index = column
        elif text == SERIES_SENTINEL:
            if len(series_columns) == 2:
                raise AmbiguousColumns(
                    f'Found too many columns with text "{SERIES_SENTINEL}"',
                    context={"cells": list(cells)},
                )
            series_columns.append(column)

    if not series_columns:
        return None
    if len(series_columns) == 1:
        raise UnpairedSeriesColumn(
            f"Found male column {series_columns[0]} but no female column",
            context={"cells": list(cells)},
        )
    if row_index is None:
        raise MissingRowIndexColumn(
            "Found male and female columns but no row number column",
            context={"cells": list(cells)},
        )

    return ColumnRoles(
        row_index=row_index, male=series_columns[0], female=series_columns[1]
    )


@dataclass(frozen=True)
class ColumnLatch:
    """One-shot column role state: undetected until a row fixes the roles.

    ``offer`` never mutates; it returns the latch to carry to the next row.
    """

    roles: Optional[ColumnRoles] = None

    @property
    def is_detected(self) -> bool:
        return self.roles is not None

    def offer(self, cells: Sequence[str]) -> "ColumnLatch":
        if self.is_detected:
            return self
        roles = detect_column_roles(cells)
        if roles is None:
            return self
        return ColumnLatch(roles)
