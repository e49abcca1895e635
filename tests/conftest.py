"""
Shared fixtures: synthetic life table rows and HTML pages
"""

import os
import sys
from typing import List

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def life_table_rows(ages: int = 60) -> List[List[str]]:
    """
    Rows shaped like the SSA cohort table: a probe row, then one row per age

    Male survivors drop by 1,000 per age and female by 500, so the expected
    series are [1.0, 0.99, 0.98, ...] and [1.0, 0.995, 0.99, ...].
    """
    rows = [["-", "0", "100000", "100000"]]
    for age in range(ages):
        rows.append(
            [
                str(age),
                str(age),
                f"{100000 - 1000 * age:,}",
                f"{100000 - 500 * age:,}",
            ]
        )
    return rows


def rows_to_html_table(rows: List[List[str]]) -> str:
    body = "".join(
        "<tr>" + "".join(f"<td> {cell} </td>" for cell in row) + "</tr>"
        for row in rows
    )
    return f"<table>{body}</table>"


def life_table_page(ages: int = 60) -> str:
    """A page with a small navigation table ahead of the data table"""
    nav = rows_to_html_table([["Home", "Tables"], ["Notes", "Contact"]])
    data = rows_to_html_table(life_table_rows(ages))
    return f"<html><body>{nav}<p>Table 7</p>{data}</body></html>"


@pytest.fixture
def sample_rows():
    return life_table_rows()


@pytest.fixture
def sample_page():
    return life_table_page()
