"""Minimal logging utilities for Tiza.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tiza.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing formula")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tiza." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tiza.mymodule'
    """
    if not (name == "tiza" or name.startswith("tiza.")):
        name = f"tiza.{name}"
    return logging.getLogger(name)
