import logging
import os
from datetime import datetime

from .env import env_get

DEFAULT_LOG_DIR = "logs"


def setup_logging(level=logging.INFO, log_dir: str | None = None):
    """Setup basic logging configuration"""
    log_dir = log_dir or env_get("LIFETABLES_LOG_DIR", DEFAULT_LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(
                os.path.join(
                    log_dir, f"lifetables_{datetime.now().strftime('%Y-%m-%d')}.log"
                )
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger(__name__)
