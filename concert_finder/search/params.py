"""Translate a SearchIntent into Ticketmaster event search params."""

import logging
import math
import numbers
from typing import Any, Optional

from multidict import MultiDict

from ..models.intent import DEFAULT_SIZE, SearchIntent
from ..utils.region_codes import resolve_region_code
from .date_window import DateWindow, compute_window

logger = logging.getLogger(__name__)

MIN_SIZE = 1
MAX_SIZE = 9999


def clamp_size(size: Any) -> int:
    """
    Clamp a requested page size into [1, 9999], rounding half up.

    Non-numeric or NaN sizes fall back to the default page size.
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Real):
        return DEFAULT_SIZE
    value = float(size)
    if math.isnan(value):
        return DEFAULT_SIZE
    value = min(max(float(MIN_SIZE), value), float(MAX_SIZE))
    return int(math.floor(value + 0.5))


def valid_radius(radius: Any) -> Optional[int]:
    """Return radius as an int if it is a positive integer, else None."""
    if isinstance(radius, bool) or not isinstance(radius, numbers.Real):
        return None
    if isinstance(radius, float) and not radius.is_integer():
        return None
    value = int(radius)
    return value if value > 0 else None


def build_query_params(
    intent: SearchIntent, window: Optional[DateWindow] = None
) -> "MultiDict[str]":
    """
    Build the ordered upstream query params for an intent.

    Never raises; malformed numeric inputs are dropped or defaulted.

    Args:
        intent: The search request
        window: Precomputed date window (computed from the intent if omitted)

    Returns:
        MultiDict of string params in request order
    """
    if window is None:
        window = compute_window(intent.start_date, intent.end_date)

    params: "MultiDict[str]" = MultiDict()

    # Location is always sent so the provider computes distances
    params.add("latlong", f"{intent.latitude},{intent.longitude}")
    params.add("unit", "km")

    selector = intent.selector()
    if selector == "id":
        params.add("id", ",".join(intent.event_ids))
    elif selector == "attractionId":
        params.add("attractionId", ",".join(intent.attraction_ids))
    elif selector == "keyword":
        params.add("keyword", intent.keyword)

    radius = valid_radius(intent.radius_km)
    if radius is not None:
        params.add("radius", str(radius))
    elif intent.radius_km is not None:
        logger.debug(f"Ignoring invalid radius: {intent.radius_km!r}")

    if intent.country_code:
        params.add("countryCode", intent.country_code)

    params.add("localStartDateTime", window.query_start)
    if window.query_end:
        params.add("localEndDateTime", window.query_end)

    if intent.sort:
        params.add("sort", intent.sort)

    params.add("size", str(clamp_size(intent.size)))

    if selector == "keyword":
        params.add("includeSpellcheck", "yes")

    if intent.location_query:
        _add_location(params, intent.location_query)

    return params


def _add_location(params: "MultiDict[str]", location_query: str) -> None:
    cleaned = "".join(
        ch for ch in location_query.strip() if ch.isascii() and (ch.isalpha() or ch.isspace())
    ).strip()
    if not cleaned:
        logger.debug(f"Ignoring location with no letters: {location_query!r}")
        return

    state_code = resolve_region_code(cleaned)
    if state_code:
        params.add("stateCode", state_code)
    else:
        params.add("city", cleaned)
