"""Minimal logging utilities for structured-text.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from structured_text.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging

_ROOT = "structured_text"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger under the "structured_text." namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'structured_text.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
