"""
HTML Tables - Extract Layer

Turns a raw HTML body into the rows of its data table. The data table is the
one with the most rows; navigation and layout tables are small.
"""

from typing import Iterator, List

from bs4 import BeautifulSoup, Tag

from ..coreutils.errors import NoTableFound


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def element_text(element: Tag) -> str:
    """All text nodes of the element joined, surrounding whitespace trimmed."""
    return "".join(element.strings).strip()


def locate_main_table(document: BeautifulSoup) -> Tag:
    """
    Select the table with the most <tr> rows

    Ties go to the table appearing last in the document.

    Raises:
        NoTableFound: If the document has no tables at all
    """
    best_table = None
    best_count = -1
    for table in document.find_all("table"):
        row_count = len(table.find_all("tr"))
        if row_count >= best_count:
            best_table = table
            best_count = row_count

    if best_table is None:
        raise NoTableFound("No tables found in document")
    return best_table


def table_rows(table: Tag) -> Iterator[List[str]]:
    """Yield each row's <td> cell texts, in document order."""
    for row in table.find_all("tr"):
        yield [element_text(cell) for cell in row.find_all("td")]
