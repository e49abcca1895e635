"""
Test Survivorship Statistics - polars aggregates over collected tables
"""

import polars as pl
import pytest

from lifetables.transformation.schemas import SURVIVORSHIP_FRAME_SCHEMA, SurvivorshipTable
from lifetables.transformation.stats import (
    difference_stats,
    tables_to_frame,
    yearly_mean_percentages,
)


def make_table(male, female):
    return SurvivorshipTable(male=list(male), female=list(female))


def test_tables_to_frame_is_long_and_ordered_by_year():
    tables = {
        2000: make_table([1.0, 0.5], [1.0, 0.75]),
        1900: make_table([1.0, 0.25, 0.0], [1.0, 0.5, 0.25]),
    }

    df = tables_to_frame(tables)

    assert df.schema == SURVIVORSHIP_FRAME_SCHEMA
    assert df.height == 5
    assert df["year"].to_list() == [1900, 1900, 1900, 2000, 2000]
    assert df["age"].to_list() == [0, 1, 2, 0, 1]


def test_tables_to_frame_empty():
    df = tables_to_frame({})

    assert df.height == 0
    assert df.schema == SURVIVORSHIP_FRAME_SCHEMA


def test_difference_stats_use_population_variance():
    # differences: 0.0, 0.25, 0.5
    table = make_table([1.0, 0.5, 0.25], [1.0, 0.75, 0.75])

    stats = difference_stats(table)

    assert stats["mean"] == pytest.approx(0.25)
    assert stats["variance"] == pytest.approx(0.125 / 3)
    assert stats["std"] == pytest.approx((0.125 / 3) ** 0.5)


def test_yearly_mean_percentages_rounded():
    tables = {
        1910: make_table([1.0, 0.5], [1.0, 0.75]),
        1900: make_table([1.0, 0.3334], [1.0, 0.6666]),
    }

    summary = yearly_mean_percentages(tables)

    assert isinstance(summary, pl.DataFrame)
    assert summary.columns == ["year", "female_mean_pct", "male_mean_pct"]
    assert summary["year"].to_list() == [1900, 1910]
    assert summary["female_mean_pct"].to_list() == pytest.approx([83.33, 87.5])
    assert summary["male_mean_pct"].to_list() == pytest.approx([66.67, 75.0])
