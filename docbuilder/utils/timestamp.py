"""Date formatting utilities and the injectable clock."""

from datetime import date, datetime
from typing import Callable, Optional

# Day.Month.Year, the convention used on every generated document
DATE_FORMAT = "%d.%m.%Y"

Clock = Callable[[], date]


def today() -> date:
    """Default clock: the current local date."""
    return date.today()


def format_date(value: date) -> str:
    """
    Format a date with the document date convention.

    Examples:
        format_date(date(2024, 6, 15))
        # "15.06.2024"
    """
    return value.strftime(DATE_FORMAT)


def format_iso_date(iso_date: Optional[str]) -> str:
    """
    Format an ISO 8601 date string (as produced by a date input) for display.

    Args:
        iso_date: ISO 8601 date or datetime string

    Returns:
        Formatted date, "" for empty input, or the original string if it
        cannot be parsed

    Examples:
        format_iso_date("2024-06-15")
        # "15.06.2024"

        format_iso_date("next Tuesday")
        # "next Tuesday"
    """
    if not iso_date or not iso_date.strip():
        return ""

    try:
        return format_date(datetime.fromisoformat(iso_date.strip()))
    except ValueError:
        return iso_date
