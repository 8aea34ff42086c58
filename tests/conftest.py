"""Shared fixtures for concert_finder tests."""

import copy
from typing import Any, Callable, Dict

import pytest

from concert_finder.config.loader import ProviderConfig
from concert_finder.providers.ticketmaster import TicketmasterClient

TM_BASE_URL = "https://app.ticketmaster.com/discovery/v2"
SPOTIFY_BASE_URL = "https://api.spotify.com/v1"

SAMPLE_EVENT: Dict[str, Any] = {
    "id": "vvG1zZ9Jz1nS8",
    "name": "Artist X presents Tour Y",
    "url": "https://www.ticketmaster.com/event/vvG1zZ9Jz1nS8",
    "images": [
        {"ratio": "3_2", "width": 640, "url": "https://img.test/3_2_640.jpg"},
        {"ratio": "16_9", "width": 640, "url": "https://img.test/16_9_640.jpg"},
        {"ratio": "16_9", "width": 1024, "url": "https://img.test/16_9_1024.jpg"},
        {"ratio": "3_2", "width": 305, "url": "https://img.test/3_2_305.jpg"},
        {"ratio": "4_3", "width": 305, "url": "https://img.test/4_3_305.jpg"},
    ],
    "dates": {
        "start": {"localDate": "2025-07-04", "localTime": "19:30:00"},
        "status": {"code": "onsale"},
    },
    "classifications": [{"genre": {"name": "Rock"}}],
    "priceRanges": [
        {"type": "standard", "currency": "USD", "min": 10, "max": 20},
        {"type": "standard", "currency": "USD", "min": 10, "max": 20},
        {"type": "standard", "currency": "USD", "min": 15, "max": 25},
    ],
    "info": "Doors at 7.\r\n\r\nNo re-entry.",
    "pleaseNote": "   ",
    "accessibility": {"info": "Wheelchair seating available."},
    "ticketLimit": {"info": "Limit 8 per order."},
    "_embedded": {
        "attractions": [{"id": "K8vZ9171ob7", "name": "Artist X"}],
        "venues": [
            {
                "name": "State Farm Center",
                "url": "https://www.ticketmaster.com/venue/1",
                "images": [{"url": "https://img.test/venue.jpg"}],
                "city": {"name": "Champaign"},
                "state": {"stateCode": "IL", "name": "Illinois"},
                "country": {"name": "United States Of America", "countryCode": "US"},
                "address": {"line1": "1800 S 1st St"},
                "distance": 2.34,
                "location": {"latitude": "40.0961", "longitude": "-88.2359"},
                "generalInfo": {"generalRule": "No outside food or drink."},
                "accessibleSeatingDetail": "Call the box office.",
            }
        ],
    },
}


@pytest.fixture
def make_raw_event() -> Callable[..., Dict[str, Any]]:
    """Return a builder for raw provider events with top-level overrides."""

    def _make(**overrides: Any) -> Dict[str, Any]:
        event = copy.deepcopy(SAMPLE_EVENT)
        event.update(overrides)
        return event

    return _make


@pytest.fixture
def raw_event(make_raw_event: Callable[..., Dict[str, Any]]) -> Dict[str, Any]:
    return make_raw_event()


@pytest.fixture
def tm_config() -> ProviderConfig:
    return ProviderConfig(base_url=TM_BASE_URL, timeout=5)


@pytest.fixture
def tm_client(tm_config: ProviderConfig) -> TicketmasterClient:
    return TicketmasterClient(tm_config, api_key="test-key")


@pytest.fixture
def spotify_config() -> ProviderConfig:
    return ProviderConfig(base_url=SPOTIFY_BASE_URL, timeout=5)
