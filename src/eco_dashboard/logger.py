"""
Logging configuration for the CLI and flows.

Library modules only call ``logging.getLogger(__name__)``; entry points call
``setup_logging()`` once.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", name: str = "eco_dashboard") -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...).
        name: Logger to configure.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Re-running setup must not stack handlers
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
