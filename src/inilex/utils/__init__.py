"""Utility modules for inilex.

Provides:
- logger: get_logger for logging
"""

from inilex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
