"""Minimal logging utilities for inilex.

Provides a simple get_logger function that wraps the standard library logging.
inilex never installs handlers; applications configure output as usual.

Example:
    >>> from inilex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing app.ini")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "inilex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'inilex.mymodule'
    """
    if not (name == "inilex" or name.startswith("inilex.")):
        name = f"inilex.{name}"
    return logging.getLogger(name)
