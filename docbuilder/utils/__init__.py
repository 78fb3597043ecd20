"""
Shared utilities for docbuilder.

Common functionality used across contexts:
- Logger setup
- Date formatting and the injectable clock
- Text processing
"""

from docbuilder.utils.timestamp import format_date, format_iso_date, today

__all__ = ["format_date", "format_iso_date", "today"]
