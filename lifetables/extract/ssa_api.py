"""
SSA Life Tables Client - Pure I/O Operations

This module handles all HTTP calls to the SSA actuarial notes site with no
parsing logic. Returns raw HTML bodies for the transform layer.
"""

import requests
import time
from typing import Optional
import logging

from ..coreutils.env import env_get, env_get_float
from ..coreutils.errors import TransportError
from ..coreutils.rate_limiter import RateLimiter, DEFAULT_INTERVAL
from ..coreutils.request import new_session, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

# Cohort life table (Table 7) for a single year of birth
LIFE_TABLE_URL_TEMPLATE = (
    "https://www.ssa.gov/oact/NOTES/as120/LifeTables_Tbl_7_{year}.html"
)

REQUEST_TIMEOUT = 30


def default_request_delay() -> float:
    return env_get_float("LIFETABLES_REQUEST_DELAY", DEFAULT_INTERVAL)


def life_table_url(year: int) -> str:
    return LIFE_TABLE_URL_TEMPLATE.format(year=year)


class LifeTablesClient:
    """Throttled HTML client for the SSA life table pages"""

    def __init__(
        self,
        rate_limiter: Optional[RateLimiter] = None,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.rate_limiter = rate_limiter or RateLimiter(default_request_delay())
        self.session = session or new_session(
            env_get("LIFETABLES_USER_AGENT", DEFAULT_USER_AGENT)
        )
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        """
        Fetch one document, waiting on the rate limiter first

        Args:
            url: Document URL

        Returns:
            str: Response body as text

        Raises:
            TransportError: On connection failure, timeout or non-2xx status
        """
        self.rate_limiter.acquire()
        logger.debug(f"Fetching from {url}")
        start_time = time.time()

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            status_code = getattr(getattr(e, "response", None), "status_code", None)
            logger.error(f"Error fetching {url}: {e}")
            raise TransportError(
                f"HTTP request failed for {url}: {e}",
                url=url,
                status_code=status_code,
            ) from e

        elapsed = time.time() - start_time
        logger.info(f"Fetched from {url}: {elapsed:.2f} seconds")
        return response.text

    def fetch_year(self, year: int) -> str:
        """Fetch the cohort life table page for one year of birth"""
        return self.fetch(life_table_url(year))
