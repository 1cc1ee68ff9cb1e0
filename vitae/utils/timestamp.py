"""Timestamp and date formatting utilities."""

from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser


def now() -> str:
    """Current local time as a filesystem-safe stamp (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse a résumé date string into a datetime.

    Accepts anything dateutil reads as a calendar date: ISO 8601, partial
    dates ("2021", "2021-6"), numeric ("06/01/2021") and month-name forms
    ("June 2021", "1 June 2021", "Jun 1 2021").

    Args:
        value: Date string (e.g., "2021-06-01", "2021-06", "June 2021")

    Returns:
        Parsed datetime, or None if the string isn't a valid date
    """
    text = value.strip()
    if not text:
        return None

    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError):
        # ParserError and out-of-range fields ("2021-13-45") are both ValueErrors
        return None


def normalize_date(value: Optional[str], fallback: str = "Present") -> str:
    """
    Reduce a date string to its display year.

    Absent (None or empty) and unparseable values never raise; they produce
    the fallback label instead.

    Args:
        value: Date string or None
        fallback: Label returned when value is absent or unparseable

    Returns:
        Four-digit year as a string, or fallback

    Examples:
        normalize_date("2021-06-01")
        # "2021"

        normalize_date(None, fallback="")
        # ""

        normalize_date("not-a-date")
        # "Present"
    """
    if value is None or value == "":
        return fallback

    parsed = parse_date(str(value))
    if parsed is None:
        return fallback

    return str(parsed.year)
