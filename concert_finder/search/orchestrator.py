import logging
from typing import Any, Dict, List, Optional

from ..models import SearchIntent, SearchResult
from ..providers.base import ProviderError
from ..providers.ticketmaster import EventQueryResponse, TicketmasterClient
from .date_window import compute_window
from .normalizer import EventNormalizer
from .params import build_query_params


class EventSearch:
    """Runs one event search per call: build params, query, filter, normalize.

    Holds no state between calls beyond the injected client.
    """

    def __init__(self, client: TicketmasterClient) -> None:
        self.client = client
        self.logger = logging.getLogger(__name__)

    async def search(self, intent: SearchIntent) -> SearchResult:
        """
        Search for events matching the intent.

        Provider failures are returned as SearchResult.error with no events;
        this method does not raise for them.
        """
        window = compute_window(intent.start_date, intent.end_date)
        params = build_query_params(intent, window)

        try:
            response: EventQueryResponse = await self.client.query_events(params)
        except ProviderError as e:
            self.logger.error(f"Error fetching events: {e.message}")
            return SearchResult(
                events=[], spellcheck="", original_keyword="", error=e.message
            )

        records = window.apply(response.raw_events)
        dropped = len(response.raw_events) - len(records)
        if dropped:
            self.logger.debug(f"Dropped {dropped} events outside the date window")

        if not records and response.spellcheck_suggestion:
            self.logger.info(
                f"No events for '{response.original_keyword}', "
                f"suggesting '{response.spellcheck_suggestion}'"
            )
            return SearchResult(
                events=[],
                spellcheck=response.spellcheck_suggestion,
                original_keyword=response.original_keyword,
            )

        normalizer = EventNormalizer(intent.followed_event_ids)
        events: List[Dict[str, Any]] = [
            normalizer.to_output(record, intent.mode) for record in records
        ]
        self.logger.info(f"Returning {len(events)} events")

        return SearchResult(
            events=events,
            spellcheck=response.spellcheck_suggestion,
            original_keyword=response.original_keyword,
        )


async def search_events(
    client: TicketmasterClient, intent: Optional[SearchIntent] = None
) -> SearchResult:
    """Convenience wrapper for a single search."""
    return await EventSearch(client).search(intent or SearchIntent())
