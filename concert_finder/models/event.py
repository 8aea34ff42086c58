from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

PRICE_UNAVAILABLE = "Price unavailable"

# Status codes the provider is known to send
KNOWN_STATUSES = {"onsale", "offsale", "cancelled", "rescheduled", "postponed"}

# Keys retained for list display, in output order
LIST_MODE_FIELDS = [
    "id",
    "followed",
    "artistId",
    "artistName",
    "name",
    "genre",
    "date",
    "time",
    "venue",
    "city",
    "state",
    "countryCode",
    "distance",
    "status",
    "image_ratio3_2",
    "priceRanges",
]


@dataclass
class EventLocation:
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass
class NormalizedEvent:
    id: str
    followed: bool = False

    artist_id: str = ""
    artist_name: str = ""

    name: str = ""
    date: str = ""                             # YYYY-MM-DD, venue local
    time: str = ""                             # HH:MM:SS, venue local
    status: str = ""                           # provider status code, "" if missing
    url: str = ""
    genre: str = ""

    image_ratio16_9_large: str = ""
    image_ratio16_9: str = ""
    image_ratio3_2: str = ""
    image_ratio4_3: str = ""

    price_ranges: str = PRICE_UNAVAILABLE

    venue: str = ""
    venue_url: str = ""
    venue_image: str = ""
    venue_background_image: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    country_code: str = ""
    address: str = ""
    distance: float = 0
    location: EventLocation = field(default_factory=EventLocation)

    info: List[List[str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Render the client-facing event shape."""
        return {
            "id": self.id,
            "followed": self.followed,
            "artistId": self.artist_id,
            "artistName": self.artist_name,
            "name": self.name,
            "date": self.date,
            "time": self.time,
            "status": self.status,
            "url": self.url,
            "image_ratio16_9_large": self.image_ratio16_9_large,
            "image_ratio16_9": self.image_ratio16_9,
            "image_ratio3_2": self.image_ratio3_2,
            "image_ratio4_3": self.image_ratio4_3,
            "genre": self.genre,
            "priceRanges": self.price_ranges,
            "venue": self.venue,
            "venueUrl": self.venue_url,
            "venueImage": self.venue_image,
            "venueBackgroundImage": self.venue_background_image,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "countryCode": self.country_code,
            "address": self.address,
            "distance": self.distance,
            "location": {
                "latitude": self.location.latitude,
                "longitude": self.location.longitude,
            },
            "info": [list(paragraph) for paragraph in self.info],
        }


def status_badge(status: Optional[str]) -> Optional[str]:
    """Return the badge label for a status code, or None when no badge applies."""
    if not status or status not in KNOWN_STATUSES:
        return None
    return status
