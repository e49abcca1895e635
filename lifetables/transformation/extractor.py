"""
Row Extractor - Transform Layer

Walks the rows of a located life table in document order and rebuilds the
male and female survivorship series.

Per page the state runs Undetected -> Detected -> Complete (or an error is
raised). Before detection rows are only probes; the row that fixes the
column roles is the age-0 row and is read as data like every row after it.
"""

from typing import Iterable, List, Sequence
import logging

from ..coreutils.errors import UnparsableValue
from ..extract.html_tables import locate_main_table, parse_document, table_rows
from .columns import ColumnLatch, ColumnRoles
from .numbers import parse_unsigned
from .schemas import RADIX, SERIES_A_NAME, SERIES_B_NAME, SurvivorshipTable
from .validators import validate_probability, validate_series_lengths

logger = logging.getLogger(__name__)


class SeriesAccumulator:
    """Collects accepted data rows; ages must arrive as 0, 1, 2, ..."""

    def __init__(self):
        self.next_age = 0
        self.male: List[float] = []
        self.female: List[float] = []

    def consume(self, cells: Sequence[str], roles: ColumnRoles) -> bool:
        """
        Read one row with known column roles

        Returns:
            bool: True if the row was accepted as the next age
        """
        if len(cells) <= roles.max_index:
            # Footnote or spacer row
            return False

        age = parse_unsigned(cells[roles.row_index])
        if age is None or age != self.next_age:
            return False

        self._append(SERIES_A_NAME, self.male, cells[roles.male], age)
        self._append(SERIES_B_NAME, self.female, cells[roles.female], age)
        self.next_age += 1
        return True

    @staticmethod
    def _append(series_name: str, series: List[float], text: str, age: int) -> None:
        count = parse_unsigned(text)
        if count is None:
            raise UnparsableValue(
                f"Couldn't parse value in {series_name} cell at age {age}: {text!r}",
                context={"series": series_name, "age": age, "text": text},
            )
        # Pages count survivors out of RADIX births; scale to a probability
        value = count / RADIX
        previous = series[-1] if series else None
        series.append(validate_probability(series_name, age, value, previous))

    def finish(self) -> SurvivorshipTable:
        validate_series_lengths(self.male, self.female)
        return SurvivorshipTable(male=self.male, female=self.female)


def extract_survivorship_table(rows: Iterable[Sequence[str]]) -> SurvivorshipTable:
    """
    Build a validated table from row cell texts

    Args:
        rows: Each row's cell texts, in document order

    Returns:
        SurvivorshipTable: Male and female survivorship by age

    Raises:
        StructuralError: Column roles could not be established
        ValidationError: The extracted values break an invariant
    """
    latch = ColumnLatch()
    accumulator = SeriesAccumulator()

    for cells in rows:
        latch = latch.offer(cells)
        if latch.is_detected:
            accumulator.consume(cells, latch.roles)

    if latch.is_detected:
        logger.debug(f"Column roles: {latch.roles}")
    else:
        logger.warning("No row held the radix sentinels; column roles never detected")

    return accumulator.finish()


def parse_life_table_page(html: str) -> SurvivorshipTable:
    """Locate the data table in an HTML page and extract it"""
    table = locate_main_table(parse_document(html))
    return extract_survivorship_table(table_rows(table))
