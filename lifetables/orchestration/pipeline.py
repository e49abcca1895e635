"""
Pipeline Orchestrator - Year-by-year collection

Fetches and parses one cohort life table page per target year, in ascending
order, and stops at the first failure: a single bad year would otherwise
skew every aggregate computed from the dataset, so no partial result is
returned or written.
"""

from typing import Dict, Iterable, Optional
import logging

from ..coreutils.errors import LifeTablesError
from ..extract.ssa_api import LifeTablesClient
from ..load.local_storage import default_output_path, load_tables_json, save_tables_json
from ..transformation.extractor import parse_life_table_page
from ..transformation.schemas import SurvivorshipTable
from ..transformation.stats import difference_stats, yearly_mean_percentages

logger = logging.getLogger(__name__)

START_YEAR = 1900
END_YEAR = 2100
YEAR_STEP = 10


def target_years() -> range:
    return range(START_YEAR, END_YEAR + 1, YEAR_STEP)


def collect_year(client: LifeTablesClient, year: int) -> SurvivorshipTable:
    """Fetch and parse the life table for one year"""
    logger.info(f"Parsing year {year}")
    html = client.fetch_year(year)
    table = parse_life_table_page(html)
    logger.info(f"✅ Year {year}: {len(table)} ages")
    return table


def collect_survivorship_tables(
    client: LifeTablesClient, years: Iterable[int]
) -> Dict[int, SurvivorshipTable]:
    """
    Collect tables for every year, sequentially and in ascending order

    Args:
        client: Throttled client shared by all fetches
        years: Target years

    Returns:
        Dict[int, SurvivorshipTable]: Tables keyed by year

    Raises:
        LifeTablesError: On the first year that fails; nothing is returned
    """
    tables: Dict[int, SurvivorshipTable] = {}
    for year in sorted(years):
        try:
            tables[year] = collect_year(client, year)
        except LifeTablesError as e:
            logger.error(f"❌ Year {year} failed ({e.kind.value}): {e}")
            raise
    return tables


def run_collection_pipeline(
    client: Optional[LifeTablesClient] = None,
    years: Optional[Iterable[int]] = None,
    output_path: Optional[str] = None,
) -> Dict[int, SurvivorshipTable]:
    """
    Collect every target year and write the JSON file

    Returns:
        Dict[int, SurvivorshipTable]: The collected tables
    """
    client = client or LifeTablesClient()
    years = list(target_years() if years is None else years)
    output_path = output_path or default_output_path()

    if years:
        logger.info(f"🚀 Collecting {len(years)} years: {years[0]}..{years[-1]}")
    else:
        logger.warning("No target years to collect")

    tables = collect_survivorship_tables(client, years)
    save_tables_json(tables, output_path)

    logger.info(
        f"✅ Collection completed: {len(tables)} years written to {output_path}"
    )
    return tables


def run_stats_pipeline(
    input_path: Optional[str] = None, summary_year: int = END_YEAR
) -> Dict[str, object]:
    """
    Read collected tables back and compute the summary aggregates

    Args:
        input_path: JSON file written by the collection pipeline
        summary_year: Year whose female/male difference is summarized

    Returns:
        Dict: difference stats for summary_year and per-year mean percentages
    """
    input_path = input_path or default_output_path()
    tables = load_tables_json(input_path)

    if summary_year not in tables:
        raise KeyError(f"Year {summary_year} not found in {input_path}")

    logger.info(f"📊 Computing survivorship statistics from {input_path}")
    return {
        "difference": difference_stats(tables[summary_year]),
        "yearly_means": yearly_mean_percentages(tables),
    }
