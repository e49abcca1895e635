"""
Transformation Layer Schemas

The validated per-year survivorship table and the polars schema used when
tables are flattened for statistics.
"""

from dataclasses import dataclass, field
from typing import Dict, List

import polars as pl

# Cohort size every page normalizes its survivor counts against
RADIX = 100000

# A full life table runs well past age 100; anything this short is a bad parse
MIN_SERIES_LENGTH = 50

SERIES_A_NAME = "male"
SERIES_B_NAME = "female"


@dataclass(frozen=True)
class SurvivorshipTable:
    """Probability of surviving to each age (index = age), by sex"""

    male: List[float] = field(default_factory=list)
    female: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.male)

    def to_dict(self) -> Dict[str, List[float]]:
        return {SERIES_A_NAME: list(self.male), SERIES_B_NAME: list(self.female)}


SURVIVORSHIP_FRAME_SCHEMA = pl.Schema(
    [
        ("year", pl.Int64()),
        ("age", pl.Int64()),
        ("male", pl.Float64()),
        ("female", pl.Float64()),
    ]
)
