"""Logging configuration."""

import logging
import sys
from typing import Optional

from market_mock.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the service.

    Only the adapter layer (lifespan, error handlers) logs; query engines
    stay silent. `level` overrides Settings.log_level.
    """
    level_name = (level or get_settings().log_level).upper()

    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("market_mock").setLevel(level_name)

    # Per-request access lines drown out the startup summary
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(level_name)
