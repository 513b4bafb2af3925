"""Minimal logging utilities for jsscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from jsscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Scanning file")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "jsscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "jsscan" or name.startswith("jsscan.")):
        name = f"jsscan.{name}"
    return logging.getLogger(name)
