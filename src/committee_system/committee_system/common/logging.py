"""Logger setup shared by the Flask app and the scripts."""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "committee-system"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(str(level or "INFO").upper())
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the service logger, e.g. `committee-system.attendance`."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
