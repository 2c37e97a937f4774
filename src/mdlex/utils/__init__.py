"""Utility modules for mdlex.

Provides:
- logger: get_logger for logging
"""

from mdlex.utils.logger import get_logger

__all__ = ["get_logger"]
