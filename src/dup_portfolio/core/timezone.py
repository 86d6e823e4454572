"""Date and time helpers."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def parse_entry_date(value: str) -> Optional[datetime]:
    """
    Parse an ISO entry date into a naive UTC datetime for ordering.

    Naive values are taken as UTC; aware values are converted to UTC.
    Returns None when the text is not an ISO date.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = date_parser.isoparse(value.strip())
        if dt.tzinfo is not None:
            # Converting near year 1 or 9999 can leave the datetime range
            dt = dt.astimezone(pytz.utc).replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None
    return dt
