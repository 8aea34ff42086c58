"""Cross-reference followed artists with the ticketing catalog."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..models import CatalogArtist, FollowedArtist, SyncedArtist
from ..models.artist import SOCIAL_LINK_KEYS
from ..providers.spotify import SpotifyClient
from ..providers.ticketmaster import TicketmasterClient
from ..search.normalizer import IMAGE_3_2, IMAGE_16_9_LARGE, find_image

logger = logging.getLogger(__name__)


def catalog_artist_from_attraction(name: str, attraction: Dict[str, Any]) -> CatalogArtist:
    """Build a CatalogArtist from a raw Ticketmaster attraction."""
    classifications = attraction.get("classifications") or [{}]
    genre = ((classifications[0] or {}).get("genre") or {}).get("name") or "General"
    external_links = attraction.get("externalLinks") or {}

    social_links: Dict[str, str] = {}
    for key in SOCIAL_LINK_KEYS:
        links = external_links.get(key) or []
        social_links[key] = (links[0].get("url") or "") if links else ""

    return CatalogArtist(
        name=name,
        ticketmaster_id=attraction.get("id", ""),
        url=attraction.get("url") or "",
        genre=f"Music | {genre}",
        upcoming_events=(attraction.get("upcomingEvents") or {}).get("_total") or 0,
        image_16_9=find_image(attraction.get("images"), IMAGE_16_9_LARGE),
        image_3_2=find_image(attraction.get("images"), IMAGE_3_2),
        social_links=social_links,
    )


async def get_ticketmaster_ids(
    client: TicketmasterClient, artists: Iterable[FollowedArtist]
) -> List[CatalogArtist]:
    """
    Resolve each followed artist against the ticketing catalog.

    Lookups run one at a time to keep upstream request rates low. Artists
    without a matching attraction are left out.

    Raises:
        ProviderError: If any lookup fails
    """
    results: List[CatalogArtist] = []
    for artist in artists:
        attraction = await client.find_attraction(artist.name)
        if attraction is None:
            logger.info(f"No catalog entry for {artist.name}")
            continue
        results.append(catalog_artist_from_attraction(artist.name, attraction))
    return results


def merge_followed_artists(
    followed: Iterable[FollowedArtist], catalog: Iterable[CatalogArtist]
) -> List[SyncedArtist]:
    """
    Attach catalog records to followed artists.

    The join is on exact, case-sensitive artist name.
    """
    by_name: Dict[str, CatalogArtist] = {}
    for entry in catalog:
        by_name.setdefault(entry.name, entry)

    merged: List[SyncedArtist] = []
    for artist in followed:
        match: Optional[CatalogArtist] = by_name.get(artist.name)
        merged.append(
            SyncedArtist(
                id=artist.id,
                name=artist.name,
                follower_count=artist.follower_count,
                image_url=artist.image_url,
                catalog=match,
            )
        )
    return merged


async def sync_followed_artists(
    spotify: SpotifyClient, ticketmaster: TicketmasterClient, access_token: str
) -> List[SyncedArtist]:
    """Fetch followed artists and merge in their catalog cross-references."""
    followed = await spotify.list_followed_artists(access_token)
    catalog = await get_ticketmaster_ids(ticketmaster, followed)
    logger.info(f"Matched {len(catalog)} of {len(followed)} followed artists")
    return merge_followed_artists(followed, catalog)
