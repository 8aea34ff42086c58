from .artist import CatalogArtist, FollowedArtist, SyncedArtist
from .event import (
    LIST_MODE_FIELDS,
    PRICE_UNAVAILABLE,
    EventLocation,
    NormalizedEvent,
    status_badge,
)
from .intent import SearchIntent, SearchMode
from .result import SearchResult

__all__ = [
    "SearchIntent",
    "SearchMode",
    "NormalizedEvent",
    "EventLocation",
    "SearchResult",
    "FollowedArtist",
    "CatalogArtist",
    "SyncedArtist",
    "LIST_MODE_FIELDS",
    "PRICE_UNAVAILABLE",
    "status_badge",
]
