"""Ready-made searches behind the app's event pages.

Each feed turns a viewer's context into a SearchIntent and runs it through
EventSearch. Anonymous viewers never get followed-event tagging.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional

from .config.loader import SearchConfig
from .models import SearchIntent, SearchMode, SearchResult
from .models.intent import DEFAULT_SIZE, DateBound
from .search.orchestrator import EventSearch
from .utils.geolocation import DEFAULT_LOCATE_TIMEOUT, Coordinates, locate

logger = logging.getLogger(__name__)

RECOMMENDED_FETCH_SIZE = 40
RECOMMENDED_LIMIT = 8


@dataclass
class Viewer:
    coordinates: Coordinates
    authenticated: bool = False
    followed_artist_ids: List[str] = field(default_factory=list)
    followed_event_ids: List[str] = field(default_factory=list)
    range_km: Optional[int] = None

    def tagged_event_ids(self) -> List[str]:
        return list(self.followed_event_ids) if self.authenticated else []


async def resolve_coordinates(
    config: SearchConfig,
    lookup: Optional[Callable[[], Awaitable[Coordinates]]] = None,
    timeout: float = DEFAULT_LOCATE_TIMEOUT,
) -> Coordinates:
    """Locate the viewer, falling back to the configured default location."""
    if lookup is None:
        return config.default_location
    located = await locate(lookup, timeout=timeout)
    if isinstance(located, Coordinates):
        return located
    logger.info("Location unavailable, using default location")
    return config.default_location


def _intent(viewer: Viewer, **kwargs) -> SearchIntent:
    return SearchIntent(
        latitude=viewer.coordinates.latitude,
        longitude=viewer.coordinates.longitude,
        followed_event_ids=set(viewer.tagged_event_ids()),
        **kwargs,
    )


async def event_feed(
    search: EventSearch,
    viewer: Viewer,
    config: SearchConfig,
    size: Optional[float] = None,
    start_date: Optional[DateBound] = None,
    end_date: Optional[DateBound] = None,
    location_query: str = "",
) -> SearchResult:
    """Upcoming concerts by followed artists, or any concerts for anonymous viewers."""
    common = dict(
        size=size if size is not None else DEFAULT_SIZE,
        sort="date,asc",
        start_date=start_date,
        end_date=end_date,
        location_query=location_query,
    )
    if viewer.authenticated and viewer.followed_artist_ids:
        return await search.search(
            _intent(viewer, attraction_ids=list(viewer.followed_artist_ids), **common)
        )
    return await search.search(
        _intent(viewer, country_code=config.feed_country_codes, **common)
    )


async def followed_events(
    search: EventSearch, viewer: Viewer, size: Optional[float] = None
) -> SearchResult:
    """Events the viewer has saved."""
    if not viewer.authenticated or not viewer.followed_event_ids:
        return SearchResult()
    return await search.search(
        _intent(
            viewer,
            event_ids=list(viewer.followed_event_ids),
            size=size if size is not None else DEFAULT_SIZE,
            sort="date,asc",
        )
    )


async def recommended_events(
    search: EventSearch,
    viewer: Viewer,
    config: SearchConfig,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    A small random sample of nearby events.

    Events by followed artists and events already saved are left out, since
    the other feeds show them. The order of the sample is unspecified.
    """
    radius = viewer.range_km if viewer.authenticated and viewer.range_km else None
    result = await search.search(
        _intent(
            viewer,
            radius_km=radius or config.recommended_radius_km,
            size=RECOMMENDED_FETCH_SIZE,
            sort="distance,asc",
        )
    )
    if result.error:
        return result

    events = result.events
    if viewer.authenticated:
        followed_artists = set(viewer.followed_artist_ids)
        saved = set(viewer.followed_event_ids)
        events = [
            event
            for event in events
            if event.get("artistId") not in followed_artists
            and event.get("id") not in saved
        ]

    events = list(events)
    (rng or random).shuffle(events)
    result.events = events[:RECOMMENDED_LIMIT]
    return result


async def artist_events(
    search: EventSearch,
    viewer: Viewer,
    artist_id: str,
    size: Optional[float] = None,
    location_query: str = "",
) -> SearchResult:
    """Upcoming events for one artist."""
    return await search.search(
        _intent(
            viewer,
            attraction_ids=[artist_id],
            size=size if size is not None else DEFAULT_SIZE,
            sort="date,asc",
            location_query=location_query,
        )
    )


async def keyword_search(
    search: EventSearch,
    viewer: Viewer,
    keyword: str,
    size: Optional[float] = None,
    start_date: Optional[DateBound] = None,
    end_date: Optional[DateBound] = None,
    location_query: str = "",
) -> SearchResult:
    """Free-text event search with spellcheck suggestions."""
    return await search.search(
        _intent(
            viewer,
            keyword=keyword,
            size=size if size is not None else DEFAULT_SIZE,
            sort="date,asc",
            start_date=start_date,
            end_date=end_date,
            location_query=location_query,
        )
    )


async def event_detail(
    search: EventSearch, viewer: Viewer, event_id: str
) -> SearchResult:
    """Full detail for a single event."""
    return await search.search(
        _intent(
            viewer,
            event_ids=[event_id],
            size=1,
            sort="distance,asc",
            mode=SearchMode.DETAIL,
        )
    )
