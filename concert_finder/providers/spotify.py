"""Spotify Web API client (followed artists only)."""

from typing import Any, List, Optional

from ..models import FollowedArtist
from .base import ProviderClient

SPOTIFY_BASE_URL = "https://api.spotify.com/v1"


class SpotifyClient(ProviderClient):
    name = "Spotify"

    def error_message(self, body: Any) -> Optional[str]:
        # {"error": {"status": 401, "message": "The access token expired"}}
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            message = body["error"].get("message")
            return f"Spotify: {message}" if message else None
        return None

    async def list_followed_artists(self, access_token: str) -> List[FollowedArtist]:
        """Return the artists followed by the token's owner."""
        data = await self.get_json(
            "/me/following",
            params={"type": "artist"},
            headers={"Authorization": f"Bearer {access_token}"},
        )
        items = (data.get("artists") or {}).get("items") or []

        artists: List[FollowedArtist] = []
        for item in items:
            images = item.get("images") or []
            artists.append(
                FollowedArtist(
                    id=item.get("id", ""),
                    name=item.get("name", ""),
                    follower_count=(item.get("followers") or {}).get("total") or 0,
                    image_url=(images[0].get("url") or "") if images else "",
                )
            )

        self.logger.info(f"Spotify returned {len(artists)} followed artists")
        return artists
