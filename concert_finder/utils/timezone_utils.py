"""
Timezone utilities for the fixed reference timezone used by event searches.

Searches are scoped to the US Midwest, so a single civil timezone
(America/Chicago) is used whenever "now" has to be expressed as a local
date-time for the event provider. No general timezone conversion is done.
"""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

REFERENCE_TZ_NAME = "America/Chicago"

# Central timezone constant that handles CST/CDT transitions automatically
REFERENCE_TZ = ZoneInfo(REFERENCE_TZ_NAME)

# Provider local date-time format, e.g. "2024-05-01T19:30:00"
LOCAL_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def now_in_reference_tz() -> datetime:
    """
    Get current datetime in the reference timezone.

    Returns:
        Current datetime as timezone-aware datetime in America/Chicago
    """
    return datetime.now(REFERENCE_TZ)


def to_reference_naive(dt: datetime) -> datetime:
    """
    Convert a datetime to the reference timezone and drop the tzinfo.

    Args:
        dt: Datetime to convert (naive values are assumed to be UTC)

    Returns:
        Timezone-naive datetime in reference local time
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt.astimezone(REFERENCE_TZ).replace(tzinfo=None)


def format_local_datetime(dt: Optional[datetime] = None) -> str:
    """
    Format a datetime as a provider local date-time string in reference time.

    Args:
        dt: Datetime to format (defaults to now)

    Returns:
        String like "2024-05-01T19:30:00"
    """
    if dt is None:
        dt = now_in_reference_tz()
    return to_reference_naive(dt).strftime(LOCAL_DATETIME_FORMAT)


def start_of_day(day: date) -> str:
    """Local date-time string for the first second of a day."""
    return f"{day.isoformat()}T00:00:00"


def end_of_day(day: date) -> str:
    """Local date-time string for the last second of a day."""
    return f"{day.isoformat()}T23:59:59"


def format_event_time(local_time: str) -> str:
    """
    Format a provider local time ("19:30:00") for display.

    Returns:
        Formatted time string like "7:30 PM CT", or "" if unparseable
    """
    if not local_time:
        return ""
    try:
        parsed = datetime.strptime(local_time, "%H:%M:%S")
    except ValueError:
        return ""
    return parsed.strftime("%I:%M %p").lstrip("0") + " CT"
