"""
Text processing utilities for field values.
"""

import re
from typing import List, Optional

WHITESPACE_RUN = re.compile(r"\s+")


def split_lines(text: Optional[str]) -> List[str]:
    """
    Split a multi-line field into trimmed, non-blank lines.

    Handles \\n, \\r\\n and \\r line endings. Order is preserved.

    Example:
        >>> split_lines("  Python \\n\\nSQL\\r\\n")
        ['Python', 'SQL']
    """
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def collapse_whitespace(text: str, replacement: str = "_") -> str:
    """
    Replace every run of whitespace with a single replacement string.

    Example:
        >>> collapse_whitespace("Letter_Mary  Ann Smith.pdf")
        'Letter_Mary_Ann_Smith.pdf'
    """
    return WHITESPACE_RUN.sub(replacement, text)


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not str(value).strip()
