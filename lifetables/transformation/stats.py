"""
Survivorship Statistics - Transform Layer

Summary aggregates over collected tables: how far female survivorship sits
above male for one year, and mean survivorship per year.
"""

import polars as pl
from typing import Dict, Any, Mapping
from .schemas import SurvivorshipTable, SURVIVORSHIP_FRAME_SCHEMA
import logging

logger = logging.getLogger(__name__)


def tables_to_frame(tables: Mapping[int, SurvivorshipTable]) -> pl.DataFrame:
    """
    Flatten per-year tables into one long DataFrame

    Args:
        tables: Mapping of year to table

    Returns:
        pl.DataFrame: One row per (year, age) with SURVIVORSHIP_FRAME_SCHEMA
    """
    frames = [
        pl.DataFrame(
            {
                "year": [year] * len(table),
                "age": list(range(len(table))),
                "male": table.male,
                "female": table.female,
            },
            schema=SURVIVORSHIP_FRAME_SCHEMA,
        )
        for year, table in sorted(tables.items())
    ]
    if not frames:
        return pl.DataFrame(schema=SURVIVORSHIP_FRAME_SCHEMA)
    return pl.concat(frames)


def difference_stats(table: SurvivorshipTable) -> Dict[str, Any]:
    """
    Mean, variance and standard deviation of (female - male) across ages

    Variance is the population variance (ddof=0).
    """
    df = pl.DataFrame(
        {"male": table.male, "female": table.female},
        schema={"male": pl.Float64(), "female": pl.Float64()},
    )
    diff = df.select((pl.col("female") - pl.col("male")).alias("difference"))
    result = diff.select(
        pl.col("difference").mean().alias("mean"),
        pl.col("difference").var(ddof=0).alias("variance"),
        pl.col("difference").std(ddof=0).alias("std"),
    ).row(0, named=True)

    logger.info(
        f"Mean difference: {result['mean']}, variance: {result['variance']}, "
        f"std: {result['std']}"
    )
    return result


def yearly_mean_percentages(tables: Mapping[int, SurvivorshipTable]) -> pl.DataFrame:
    """
    Mean survivorship per year, as percentages rounded to two decimals

    Returns:
        pl.DataFrame: Columns year, female_mean_pct, male_mean_pct
    """
    df = tables_to_frame(tables)
    summary = (
        df.group_by("year")
        .agg(
            (pl.col("female").mean() * 100).round(2).alias("female_mean_pct"),
            (pl.col("male").mean() * 100).round(2).alias("male_mean_pct"),
        )
        .sort("year")
    )

    for row in summary.iter_rows(named=True):
        logger.info(
            f"Year: {row['year']}, Female mean: {row['female_mean_pct']:.2f}%, "
            f"Male mean: {row['male_mean_pct']:.2f}%"
        )
    return summary
