"""Structured logging for pattern events (subscribe, publish, clone)."""

import logging
import sys
from typing import Optional

from patterns.config import load_settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a configured logger. Records go to stderr; stdout is reserved for demo output."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else load_settings().log_level_value)
    return logger
