"""
Main Entry Point

Runs the collection workflow (fetch every target year and write the JSON
file) or the statistics summary over a previously written file. The year
range, radix and request spacing are fixed constants; there are no option
flags.
"""

import logging

from lifetables.coreutils.errors import LifeTablesError
from lifetables.coreutils.logging import setup_logging
from lifetables.orchestration.pipeline import (
    run_collection_pipeline,
    run_stats_pipeline,
)

logger = logging.getLogger(__name__)

COMPONENTS = ("collect", "stats")


def run_pipeline(component: str = "collect") -> dict:
    """
    Run one pipeline component

    Args:
        component: "collect" or "stats"

    Returns:
        dict: Results summary
    """
    logger.info(f"🚀 Running {component} pipeline")

    try:
        if component == "collect":
            tables = run_collection_pipeline()
            return {"collect": {"years": sorted(tables)}}

        elif component == "stats":
            return {"stats": run_stats_pipeline()}

        else:
            raise ValueError(f"Unknown component: {component}")

    except LifeTablesError as e:
        logger.error(f"❌ Pipeline failed with {e.kind.value} error: {e}")
        raise
    except Exception as e:
        logger.error(f"❌ Pipeline failed: {e}")
        raise


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="SSA cohort life table collector")
    parser.add_argument(
        "component",
        nargs="?",
        choices=COMPONENTS,
        default="collect",
        help="Pipeline component to run",
    )

    args = parser.parse_args()

    setup_logging()
    results = run_pipeline(args.component)
    print(f"✅ Pipeline completed: {results}")


if __name__ == "__main__":
    main()
