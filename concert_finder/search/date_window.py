"""Date range handling for event searches.

The provider does not reliably honor its own localStartDateTime /
localEndDateTime filters, so every result set is re-filtered locally on
the event's local date.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from dateutil import parser as dateutil_parser

from ..models.intent import DateBound
from ..utils.timezone_utils import (
    LOCAL_DATETIME_FORMAT,
    end_of_day,
    format_local_datetime,
    start_of_day,
    to_reference_naive,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateWindow:
    query_start: str                    # always sent upstream
    query_end: Optional[str] = None
    start: Optional[date] = None        # inclusive local filter bounds
    end: Optional[date] = None

    def matches(self, record: Dict[str, Any]) -> bool:
        """Return True if the record's local start date lies in the window."""
        event_date = event_local_date(record)
        if event_date is None:
            return False
        if self.start is not None and event_date < self.start:
            return False
        if self.end is not None and event_date > self.end:
            return False
        return True

    def apply(self, records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Keep the records that fall inside the window, preserving order."""
        return [record for record in records if self.matches(record)]


def event_local_date(record: Dict[str, Any]) -> Optional[date]:
    """Extract dates.start.localDate from a raw event, ignoring time of day."""
    try:
        local_date = record["dates"]["start"]["localDate"]
    except (KeyError, TypeError):
        return None
    return _parse_date(local_date)


def _parse_date(text: Any) -> Optional[date]:
    if not isinstance(text, str) or not text.strip():
        return None
    try:
        return date.fromisoformat(text.strip()[:10])
    except ValueError:
        return None


def _resolve_bound(bound: Optional[DateBound], is_end: bool) -> Tuple[Optional[str], Optional[date]]:
    """Return (upstream param value, local filter date) for one bound."""
    if bound is None or bound == "":
        return None, None

    if isinstance(bound, datetime):
        if bound.tzinfo is not None:
            bound = to_reference_naive(bound)
        return bound.strftime(LOCAL_DATETIME_FORMAT), bound.date()

    if isinstance(bound, date):
        return (end_of_day(bound) if is_end else start_of_day(bound)), bound

    text = str(bound).strip()
    day = _parse_date(text.split("T")[0])
    if day is None:
        try:
            day = dateutil_parser.isoparse(text).date()
        except (ValueError, OverflowError):
            logger.warning(f"Ignoring unparseable date bound: {bound!r}")
            return None, None
    return text, day


def compute_window(
    start_date: Optional[DateBound] = None,
    end_date: Optional[DateBound] = None,
    now: Optional[datetime] = None,
) -> DateWindow:
    """
    Compute the upstream date params and the local post-filter bounds.

    When neither bound is given the upstream start defaults to the current
    time in the reference timezone and no local bound applies.

    Args:
        start_date: Inclusive start, as a date or a provider date-time string
        end_date: Inclusive end, as a date or a provider date-time string
        now: Override for the current time

    Returns:
        DateWindow
    """
    query_start, start = _resolve_bound(start_date, is_end=False)
    query_end, end = _resolve_bound(end_date, is_end=True)

    if query_start is None and query_end is None:
        default_start = format_local_datetime(now)
        logger.debug(f"Using default localStartDateTime: {default_start}")
        return DateWindow(query_start=default_start)

    if query_start is None:
        # An end-only window still needs a start upstream
        query_start = format_local_datetime(now)

    return DateWindow(query_start=query_start, query_end=query_end, start=start, end=end)
