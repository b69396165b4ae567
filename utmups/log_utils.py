"""Logging utilities."""

import logging
import os

LOG_LEVEL_ENV = "UTMUPS_LOGLEVEL"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    The level is taken from the UTMUPS_LOGLEVEL environment variable and defaults to
    INFO. Handlers are left to the application.

    Args:
        name: the logger name, typically __name__.

    Returns:
        the logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(os.environ.get(LOG_LEVEL_ENV, "INFO").upper())
    return logger
