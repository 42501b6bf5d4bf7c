"""Utility modules for blockscribe.

Provides:
- text: indent_prefix, leading_width for indentation handling
- logger: get_logger for logging
"""

from blockscribe.utils.logger import get_logger
from blockscribe.utils.text import indent_prefix, leading_width

__all__ = [
    "get_logger",
    "indent_prefix",
    "leading_width",
]
