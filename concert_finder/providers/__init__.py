from .base import ProviderClient, ProviderError
from .spotify import SpotifyClient
from .ticketmaster import EventQueryResponse, TicketmasterClient

__all__ = [
    "ProviderClient",
    "ProviderError",
    "SpotifyClient",
    "TicketmasterClient",
    "EventQueryResponse",
]
