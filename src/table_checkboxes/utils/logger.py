"""Minimal logging utilities for table_checkboxes.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from table_checkboxes.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Converting checkboxes")
"""

from __future__ import annotations

import logging

_ROOT = "table_checkboxes"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "table_checkboxes." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("bulk")
        >>> logger.name
        'table_checkboxes.bulk'
    """
    if not (name == _ROOT or name.startswith(_ROOT + ".")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
