"""
Environment-driven defaults for fuel savings calculations.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_DECIMAL_PLACES = 2


def _read_decimal_places() -> int:
    raw = os.environ.get("FUEL_SAVINGS_DECIMAL_PLACES", str(DEFAULT_DECIMAL_PLACES))
    try:
        places = int(raw)
    except ValueError:
        places = -1
    if places < 0:
        logger.warning(
            "Ignoring FUEL_SAVINGS_DECIMAL_PLACES=%r, using %d", raw, DEFAULT_DECIMAL_PLACES
        )
        return DEFAULT_DECIMAL_PLACES
    return places


# Precision for breakdown figures; monthly savings are always rounded to 2 places
DECIMAL_PLACES = _read_decimal_places()

LOG_LEVEL = os.environ.get("FUEL_SAVINGS_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: Optional[str] = None):
    """Apply the configured log level to the root logger, replacing existing handlers."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
