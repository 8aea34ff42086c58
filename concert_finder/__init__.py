"""Concert discovery: followed artists and nearby events."""

from .models import SearchIntent, SearchMode, SearchResult
from .search import EventSearch, search_events

__all__ = ["SearchIntent", "SearchMode", "SearchResult", "EventSearch", "search_events"]

__version__ = "0.1.0"
