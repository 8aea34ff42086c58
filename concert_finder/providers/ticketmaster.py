"""Ticketmaster Discovery API v2 client."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import aiohttp

from ..config.loader import ProviderConfig
from .base import Params, ProviderClient

TICKETMASTER_BASE_URL = "https://app.ticketmaster.com/discovery/v2"

# Sent with every request unless the caller overrides them
TICKETMASTER_DEFAULT_PARAMS = {
    "classificationName": "Music",
    "locale": "en-us",
}


@dataclass
class EventQueryResponse:
    raw_events: List[Dict[str, Any]] = field(default_factory=list)
    spellcheck_suggestion: str = ""
    original_keyword: str = ""


class TicketmasterClient(ProviderClient):
    name = "Ticketmaster"

    def __init__(
        self,
        config: ProviderConfig,
        api_key: str,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        defaults = dict(TICKETMASTER_DEFAULT_PARAMS)
        defaults.update(config.default_params)
        defaults["apikey"] = api_key
        super().__init__(
            ProviderConfig(
                base_url=config.base_url,
                timeout=config.timeout,
                headers=dict(config.headers),
                default_params=defaults,
            ),
            session=session,
        )

    def error_message(self, body: Any) -> Optional[str]:
        # {"errors": [{"code": "...", "detail": "..."}]}
        if not isinstance(body, dict):
            return None
        errors = body.get("errors") or []
        if errors and isinstance(errors[0], dict):
            detail = errors[0].get("detail")
            if detail:
                return str(detail)
        # Gateway faults use {"fault": {"faultstring": "..."}}
        fault = body.get("fault")
        if isinstance(fault, dict) and fault.get("faultstring"):
            return str(fault["faultstring"])
        return None

    async def query_events(self, params: Params) -> EventQueryResponse:
        """Run an event search and return the raw records plus spellcheck metadata."""
        data = await self.get_json("/events.json", params=params)

        events = (data.get("_embedded") or {}).get("events") or []
        spellcheck = data.get("spellcheck") or {}
        suggestions = spellcheck.get("suggestions") or []
        suggestion = ""
        if suggestions and isinstance(suggestions[0], dict):
            suggestion = suggestions[0].get("suggestion") or ""

        self.logger.info(f"Ticketmaster returned {len(events)} events")
        return EventQueryResponse(
            raw_events=[event for event in events if isinstance(event, dict)],
            spellcheck_suggestion=suggestion,
            original_keyword=spellcheck.get("original") or "",
        )

    async def find_attraction(self, artist_name: str) -> Optional[Dict[str, Any]]:
        """
        Look up an attraction by artist name.

        Returns:
            The first attraction whose name equals artist_name ignoring case,
            or None if there is no such attraction
        """
        data = await self.get_json(
            "/attractions.json", params={"keyword": artist_name}
        )
        attractions = (data.get("_embedded") or {}).get("attractions") or []
        wanted = artist_name.lower()
        for attraction in attractions:
            if (attraction.get("name") or "").lower() == wanted:
                return attraction
        self.logger.debug(f"No attraction matched '{artist_name}'")
        return None
