from typing import Optional
from datetime import datetime
from dateutil import parser


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """Format a datetime as 'YYYY-MM-DD HH:MM:SS.mmm' (millisecond precision, zero padded)."""
    return f"{value.strftime(TIMESTAMP_FORMAT)}.{value.microsecond // 1000:03d}"


def current_timestamp(now: Optional[datetime] = None) -> str:
    """
    Current local time as a log timestamp.
    - Reads the clock once per call, so the seconds and milliseconds always agree
    - `now` lets callers format a moment they already captured
    """
    if now is None:
        now = datetime.now()
    return format_timestamp(now)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a log timestamp back into a `datetime`.
    Returns None if value is empty or invalid.
    """
    if not value:
        return None
    try:
        return parser.parse(value.strip())
    except (ValueError, OverflowError):
        return None
