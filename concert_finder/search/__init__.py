from .date_window import DateWindow, compute_window
from .normalizer import EventNormalizer, normalize_event, trim_fields
from .orchestrator import EventSearch, search_events
from .params import build_query_params, clamp_size

__all__ = [
    "DateWindow",
    "compute_window",
    "EventNormalizer",
    "normalize_event",
    "trim_fields",
    "EventSearch",
    "search_events",
    "build_query_params",
    "clamp_size",
]
