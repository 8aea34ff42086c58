from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# Attraction externalLinks keys copied onto catalog records
SOCIAL_LINK_KEYS = [
    "youtube",
    "twitter",
    "itunes",
    "lastfm",
    "spotify",
    "wiki",
    "facebook",
    "musicbrainz",
    "instagram",
    "homepage",
]


@dataclass
class FollowedArtist:
    """An artist the user follows on the streaming service."""

    id: str
    name: str
    follower_count: int = 0
    image_url: str = ""


@dataclass
class CatalogArtist:
    """Ticketing-provider cross reference for a followed artist."""

    name: str
    ticketmaster_id: str
    url: str = ""
    genre: str = ""
    upcoming_events: int = 0
    image_16_9: str = ""
    image_3_2: str = ""
    social_links: Dict[str, str] = field(default_factory=dict)


@dataclass
class SyncedArtist:
    """A followed artist merged with its catalog record, if one was found."""

    id: str
    name: str
    follower_count: int = 0
    image_url: str = ""
    catalog: Optional[CatalogArtist] = None

    @property
    def ticketmaster_id(self) -> Optional[str]:
        return self.catalog.ticketmaster_id if self.catalog else None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "followers": self.follower_count,
            "image": self.image_url,
            "ticketmaster_id": None,
            "ticketmaster_url": None,
            "ticketmaster_genre": None,
            "upcoming_events": None,
            "ticketmaster_image_16_9": None,
            "ticketmaster_image_3_2": None,
        }
        for key in SOCIAL_LINK_KEYS:
            data[f"{key}_link"] = None

        if self.catalog:
            data.update(
                {
                    "ticketmaster_id": self.catalog.ticketmaster_id,
                    "ticketmaster_url": self.catalog.url,
                    "ticketmaster_genre": self.catalog.genre,
                    "upcoming_events": self.catalog.upcoming_events,
                    "ticketmaster_image_16_9": self.catalog.image_16_9,
                    "ticketmaster_image_3_2": self.catalog.image_3_2,
                }
            )
            for key in SOCIAL_LINK_KEYS:
                data[f"{key}_link"] = self.catalog.social_links.get(key, "")
        return data
