"""Runtime configuration sourced from the environment."""

import logging
import os

# The listen address is fixed; there is no flag or env override.
HOST = "0.0.0.0"
PORT = 8080


def log_level_name() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def log_level() -> int:
    """Resolve LOG_LEVEL to a logging level, falling back to INFO."""
    level = getattr(logging, log_level_name(), logging.INFO)
    return level if isinstance(level, int) else logging.INFO
