"""Utility modules for structured-text.

Provides:
- logger: get_logger for logging
"""

from structured_text.utils.logger import get_logger

__all__ = ["get_logger"]
