"""Date and timestamp parsing utilities."""

import re
from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from recordkeep.domain.errors import ValidationError

_AGO_PATTERN = re.compile(r"^(\d+)\s+(day|week|month|year)s?\s+ago$")


def parse_timestamp(value: str, now: datetime | None = None) -> datetime:
    """Parse a timestamp string into a datetime.

    Supports various formats including relative expressions:
    - Absolute: "2024-01-15", "2024-01-15 14:30", "January 15, 2024"
    - Relative: "now", "today", "yesterday", "3 days ago", "2 months ago"

    Day-level expressions ("today", "yesterday", plain dates) resolve to
    midnight of that day.

    Args:
        value: Timestamp string
        now: Reference time for relative expressions (defaults to datetime.now())

    Returns:
        Naive datetime

    Raises:
        ValidationError: If the string cannot be parsed
    """
    text = value.strip().lower()
    if now is None:
        now = datetime.now()
    midnight = datetime.combine(now.date(), time.min)

    relative_times = {
        "now": now,
        "today": midnight,
        "yesterday": midnight - timedelta(days=1),
    }
    if text in relative_times:
        return relative_times[text]

    match = _AGO_PATTERN.match(text)
    if match:
        count = int(match.group(1))
        unit = match.group(2)
        try:
            return now - relativedelta(**{f"{unit}s": count})
        except (ValueError, OverflowError) as e:
            raise ValidationError(f"Could not parse date '{value}': {e}") from e

    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{value}': {e}") from e


def parse_date(value: str, today: date | None = None) -> date:
    """Parse a date string into a date (see parse_timestamp for formats)."""
    now = None if today is None else datetime.combine(today, time.min)
    return parse_timestamp(value, now=now).date()
