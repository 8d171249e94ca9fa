"""Utility modules for table_checkboxes.

Provides:
- logger: get_logger for logging
"""

from table_checkboxes.utils.logger import get_logger

__all__ = [
    "get_logger",
]
