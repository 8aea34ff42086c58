from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Set, Union

# Champaign-Urbana, IL
DEFAULT_LATITUDE = 40.1164
DEFAULT_LONGITUDE = -88.2434
DEFAULT_SIZE = 20

DateBound = Union[date, str]


class SearchMode(str, Enum):
    LIST = "LIST"
    DETAIL = "DETAIL"


@dataclass
class SearchIntent:
    """A single search request against the event provider.

    Exactly one selector is sent upstream, chosen by priority:
    event_ids > attraction_ids > keyword > none (geo browse).
    """

    event_ids: List[str] = field(default_factory=list)
    attraction_ids: List[str] = field(default_factory=list)
    keyword: str = ""
    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    radius_km: Optional[int] = None
    country_code: str = ""
    size: float = DEFAULT_SIZE
    sort: str = ""                                  # e.g. "date,asc", "distance,asc"
    start_date: Optional[DateBound] = None          # inclusive
    end_date: Optional[DateBound] = None            # inclusive
    location_query: str = ""                        # city name or state name/code
    mode: SearchMode = SearchMode.LIST
    followed_event_ids: Set[str] = field(default_factory=set)

    def selector(self) -> Optional[str]:
        """Return the active selector: "id", "attractionId", "keyword" or None."""
        if self.event_ids:
            return "id"
        if self.attraction_ids:
            return "attractionId"
        if self.keyword:
            return "keyword"
        return None
