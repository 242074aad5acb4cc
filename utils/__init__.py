"""Utility modules for ShabdhX.

This package provides logging setup and string helpers shared across the application.
"""

from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

__all__: list[str] = ["LoggerUtils", "StringUtils"]
