"""Numeric constants and runtime settings."""

from __future__ import annotations

import logging
import os

VERSION = "0.1.0"

# Distance below which a computed root is snapped to the nearest integer
ROOT_SNAP_TOLERANCE = 2e-14

# Largest factorial operand; keeps the exact integer product short to compute
MAX_FACTORIAL_OPERAND = 1000

LOG_LEVEL_ENV = "FANTASTICAL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level_from_env() -> str:
    """Log level name taken from the environment, upper-cased."""
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: str | None = None) -> int:
    """
    Configure the root logger for the command line front end.

    Args:
        level: Level name; falls back to FANTASTICAL_LOG_LEVEL, then WARNING

    Returns:
        The numeric level that was applied

    Raises:
        ValueError: If the level name is unknown
    """
    name = (level or log_level_from_env()).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")

    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
    return numeric
