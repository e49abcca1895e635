"""
Local Storage - Load Layer

Pure functions for writing the collected tables to disk and reading them back.
The file maps each year (as a string key) to its male/female series, with
keys sorted and pretty-printed so diffs between runs stay readable.
"""

import json
import os
from typing import Dict, Mapping
import logging

from ..coreutils.env import env_get
from ..transformation.schemas import SurvivorshipTable, SERIES_A_NAME, SERIES_B_NAME
from ..transformation.validators import validate_survivorship_table

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = "fileTables.json"


def default_output_path() -> str:
    return env_get("LIFETABLES_OUTPUT_PATH", DEFAULT_OUTPUT_PATH)


def tables_to_json_dict(
    tables: Mapping[int, SurvivorshipTable],
) -> Dict[str, Dict[str, list]]:
    return {str(year): tables[year].to_dict() for year in sorted(tables)}


def save_tables_json(tables: Mapping[int, SurvivorshipTable], filepath: str) -> str:
    """
    Save per-year survivorship tables to a JSON file

    Args:
        tables: Mapping of year to table
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving {len(tables)} survivorship tables to JSON: {filepath}")

    # Ensure directory exists
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    data = tables_to_json_dict(tables)
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2, sort_keys=True)

    logger.info(f"Saved years {list(data)} to {filepath}")
    return filepath


def load_tables_json(filepath: str) -> Dict[int, SurvivorshipTable]:
    """
    Load per-year survivorship tables from a JSON file

    Every table is validated on the way in.

    Args:
        filepath: Path to JSON file

    Returns:
        Dict[int, SurvivorshipTable]: Tables keyed by year, ascending
    """
    logger.info(f"Loading survivorship tables from JSON: {filepath}")

    if not os.path.exists(filepath):
        raise FileNotFoundError(f"JSON file not found: {filepath}")

    with open(filepath, "r") as f:
        data = json.load(f)

    tables = {}
    for year in sorted(data, key=int):
        series = data[year]
        table = SurvivorshipTable(
            male=[float(v) for v in series[SERIES_A_NAME]],
            female=[float(v) for v in series[SERIES_B_NAME]],
        )
        tables[int(year)] = validate_survivorship_table(table)

    logger.info(f"Loaded {len(tables)} survivorship tables from {filepath}")
    return tables
