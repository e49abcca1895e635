"""
Data Validators - Transform Layer

Pure functions enforcing the survivorship invariants: values are
probabilities, each series never increases with age, and both series are
full-length and the same length.
"""

from typing import List, Optional
from .schemas import SurvivorshipTable, MIN_SERIES_LENGTH, SERIES_A_NAME, SERIES_B_NAME
from ..coreutils.errors import (
    InsufficientData,
    NonMonotonicSequence,
    OutOfRangeValue,
)
import logging

logger = logging.getLogger(__name__)


def validate_probability(
    series_name: str, age: int, value: float, previous: Optional[float]
) -> float:
    """
    Check one survivorship value against its predecessor in the same series

    Args:
        series_name: "male" or "female", for error messages
        age: Age the value belongs to
        value: Survivorship probability
        previous: Value at the previous age, None at the first age

    Returns:
        float: The value, unchanged

    Raises:
        OutOfRangeValue: value is outside [0, 1]
        NonMonotonicSequence: value is greater than previous
    """
    if not 0.0 <= value <= 1.0:
        raise OutOfRangeValue(
            f"{series_name} value {value} at age {age} is out of range",
            context={"series": series_name, "age": age, "value": value},
        )
    if previous is not None and value > previous:
        raise NonMonotonicSequence(
            f"{series_name} values are not decreasing at age {age}: "
            f"{previous} -> {value}",
            context={
                "series": series_name,
                "age": age,
                "value": value,
                "previous": previous,
            },
        )
    return value


def validate_series_lengths(male: List[float], female: List[float]) -> None:
    if len(male) != len(female):
        raise InsufficientData(
            f"Series lengths differ: {SERIES_A_NAME}={len(male)}, "
            f"{SERIES_B_NAME}={len(female)}",
            context={SERIES_A_NAME: len(male), SERIES_B_NAME: len(female)},
        )
    if len(male) <= MIN_SERIES_LENGTH:
        raise InsufficientData(
            f"Only {len(male)} ages extracted, expected more than {MIN_SERIES_LENGTH}",
            context={"length": len(male)},
        )


def validate_survivorship_table(table: SurvivorshipTable) -> SurvivorshipTable:
    """
    Validate every invariant of an already-built table

    Returns:
        SurvivorshipTable: The same table, if valid
    """
    validate_series_lengths(table.male, table.female)
    for series_name, series in (
        (SERIES_A_NAME, table.male),
        (SERIES_B_NAME, table.female),
    ):
        previous = None
        for age, value in enumerate(series):
            previous = validate_probability(series_name, age, value, previous)

    logger.debug(f"Survivorship table validation passed: {len(table)} ages")
    return table
