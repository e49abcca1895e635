import requests

DEFAULT_USER_AGENT = "ssa-life-tables/1.0"


def new_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Create a new requests session for HTML page fetching.

    No retry adapter is mounted: a failed request surfaces to the caller
    on the first attempt.
    """
    session = requests.Session()

    # Set default headers
    session.headers.update(
        {"User-Agent": user_agent, "Accept": "text/html,application/xhtml+xml"}
    )

    return session
