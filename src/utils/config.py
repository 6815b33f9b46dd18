"""Runtime configuration read from the environment (and a local .env file)."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _read_positive_int(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer setting", extra={"setting": name, "value": raw})
        return None
    if value <= 0:
        logger.warning("Ignoring non-positive setting", extra={"setting": name, "value": raw})
        return None
    return value


def _read_positive_float(name: str) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric setting", extra={"setting": name, "value": raw})
        return None
    return value if value > 0 else None


def _read_log_level(name: str) -> str:
    level = os.getenv(name, "INFO").upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning("Unknown log level, using INFO", extra={"setting": name, "value": level})
        return "INFO"
    return level


LOG_LEVEL = _read_log_level("LOG_LEVEL")

# None means unbounded fan-out across all words
MAX_CONCURRENCY = _read_positive_int("LEXISCRAPE_MAX_CONCURRENCY")

# None means no timeout on individual fetches
FETCH_TIMEOUT_SECONDS = _read_positive_float("LEXISCRAPE_FETCH_TIMEOUT")
