"""Map raw Ticketmaster event records to the client-facing event shape.

Every field has a default so that partial upstream records degrade
gracefully instead of failing the batch.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

from ..models.event import (
    LIST_MODE_FIELDS,
    PRICE_UNAVAILABLE,
    EventLocation,
    NormalizedEvent,
)
from ..models.intent import SearchMode

logger = logging.getLogger(__name__)

# (ratio, width) pairs for the four event image variants
IMAGE_16_9_LARGE = ("16_9", 1024)
IMAGE_16_9 = ("16_9", 640)
IMAGE_3_2 = ("3_2", 305)
IMAGE_4_3 = ("4_3", 305)

# Title separators used to guess the artist when no attraction is linked
ARTIST_TITLE_SEPARATORS = [" presents ", " - "]

VENUE_SEARCH_URL = "https://www.google.com/search?q={query}"

VENUE_BACKGROUND_IMAGES = [
    "https://images.unsplash.com/photo-1516450360452-9312f5e86fc7?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1514525253161-7a46d19cd819?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1501281668745-f7f57925c3b4?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1540039155733-5bb30b53aa14?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1468359601543-843bfaef291a?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1492684223066-81342ee5ff30?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1497911270199-1c552ee64aa4?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1507901747481-84a4f64fda6d?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1521334726092-b509a19597c6?w=1200&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1481162854517-d9e353af153d?w=1200&auto=format&fit=crop",
]


def _dig(obj: Any, path: str) -> Any:
    """Traverse obj using dot-notation path (e.g. '_embedded.venues.0.name')."""
    for key in path.split("."):
        if isinstance(obj, dict):
            obj = obj.get(key)
        elif isinstance(obj, list):
            try:
                obj = obj[int(key)]
            except (IndexError, ValueError):
                return None
        else:
            return None
        if obj is None:
            return None
    return obj


def _text(obj: Any, path: str) -> str:
    value = _dig(obj, path)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _number(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return number if number == number else 0  # NaN -> 0


def find_image(images: Any, variant: Tuple[str, int]) -> str:
    """Return the URL of the first image matching (ratio, width) exactly."""
    if not isinstance(images, list):
        return ""
    ratio, width = variant
    for image in images:
        if not isinstance(image, dict):
            continue
        if image.get("ratio") == ratio and image.get("width") == width:
            return image.get("url") or ""
    return ""


def derive_artist_name(raw: Dict[str, Any]) -> str:
    """
    Return the headline artist for an event.

    Prefers the first linked attraction; otherwise takes the left side of
    the title split on " presents " and then " - ".
    """
    attraction_name = _text(raw, "_embedded.attractions.0.name")
    if attraction_name:
        return attraction_name

    title = raw.get("name") or ""
    if not isinstance(title, str):
        return ""
    for separator in ARTIST_TITLE_SEPARATORS:
        if separator in title:
            return title.split(separator)[0]
    logger.debug(f"No artist found for event title: {title!r}")
    return ""


def format_price_ranges(price_ranges: Any) -> str:
    """
    Format provider price ranges as "USD 10.00 - 20.00, 15.00 - 25.00".

    Entries missing min or max are skipped; identical ranges are collapsed
    keeping first-seen order; the first valid entry's currency prefixes
    the result.
    """
    if not isinstance(price_ranges, list):
        return PRICE_UNAVAILABLE

    valid = [
        price
        for price in price_ranges
        if isinstance(price, dict)
        and price.get("min") is not None
        and price.get("max") is not None
    ]
    formatted: List[str] = []
    currency = ""
    for price in valid:
        try:
            text = f"{float(price['min']):.2f} - {float(price['max']):.2f}"
        except (TypeError, ValueError):
            continue
        if not formatted:
            currency = price.get("currency") or ""
        if text not in formatted:
            formatted.append(text)

    if not formatted:
        return PRICE_UNAVAILABLE
    return f"{currency} {', '.join(formatted)}"


def venue_url(venue: Any) -> str:
    """Provider venue URL, else a web search for the venue name, else ""."""
    name = _text(venue, "name")
    if not name:
        return ""
    return _text(venue, "url") or VENUE_SEARCH_URL.format(query=quote(name, safe=""))


def venue_background_image(event_id: str) -> str:
    """Pick a background image from the palette, stable for a given event ID."""
    if not event_id:
        return VENUE_BACKGROUND_IMAGES[0]
    return VENUE_BACKGROUND_IMAGES[ord(event_id[-1]) % len(VENUE_BACKGROUND_IMAGES)]


def split_info(texts: Iterable[Any]) -> List[List[str]]:
    """Turn free-text blocks into paragraphs of non-empty lines."""
    paragraphs: List[List[str]] = []
    for text in texts:
        if not isinstance(text, str) or not text.strip():
            continue
        lines = text.replace("\r\n", "\n").split("\n")
        paragraphs.append([line for line in lines if line.strip()])
    return paragraphs


def trim_fields(event: Dict[str, Any], mode: SearchMode) -> Dict[str, Any]:
    """Reduce an event dict to the list allow-list in LIST mode."""
    if mode != SearchMode.LIST:
        return event
    return {key: event[key] for key in LIST_MODE_FIELDS if key in event}


class EventNormalizer:
    """Builds NormalizedEvent records from raw provider events."""

    def __init__(self, followed_event_ids: Optional[Iterable[str]] = None) -> None:
        self.followed_event_ids = set(followed_event_ids or ())

    def normalize(self, raw: Dict[str, Any]) -> NormalizedEvent:
        event_id = _text(raw, "id")
        venue = _dig(raw, "_embedded.venues.0") or {}
        images = raw.get("images")

        return NormalizedEvent(
            id=event_id,
            followed=event_id in self.followed_event_ids,
            artist_id=_text(raw, "_embedded.attractions.0.id"),
            artist_name=derive_artist_name(raw),
            name=_text(raw, "name"),
            date=_text(raw, "dates.start.localDate"),
            time=_text(raw, "dates.start.localTime"),
            status=_text(raw, "dates.status.code"),
            url=_text(raw, "url"),
            genre=_text(raw, "classifications.0.genre.name"),
            image_ratio16_9_large=find_image(images, IMAGE_16_9_LARGE),
            image_ratio16_9=find_image(images, IMAGE_16_9),
            image_ratio3_2=find_image(images, IMAGE_3_2),
            image_ratio4_3=find_image(images, IMAGE_4_3),
            price_ranges=format_price_ranges(raw.get("priceRanges")),
            venue=_text(venue, "name"),
            venue_url=venue_url(venue),
            venue_image=_text(venue, "images.0.url"),
            venue_background_image=venue_background_image(event_id),
            city=_text(venue, "city.name"),
            state=_text(venue, "state.stateCode"),
            country=_text(venue, "country.name"),
            country_code=_text(venue, "country.countryCode"),
            address=_text(venue, "address.line1"),
            distance=_number(_dig(venue, "distance")),
            location=EventLocation(
                latitude=_number(_dig(venue, "location.latitude")),
                longitude=_number(_dig(venue, "location.longitude")),
            ),
            info=split_info(
                [
                    raw.get("info"),
                    raw.get("pleaseNote"),
                    _dig(raw, "accessibility.info"),
                    _dig(raw, "ticketLimit.info"),
                    raw.get("additionalInfo"),
                    _dig(venue, "generalInfo.generalRule"),
                    _dig(venue, "accessibleSeatingDetail"),
                ]
            ),
        )

    def to_output(self, raw: Dict[str, Any], mode: SearchMode) -> Dict[str, Any]:
        """Normalize one record and trim it for the requested mode."""
        return trim_fields(self.normalize(raw).to_dict(), mode)


def normalize_event(
    raw: Dict[str, Any],
    followed_event_ids: Optional[Iterable[str]] = None,
    mode: SearchMode = SearchMode.LIST,
) -> Dict[str, Any]:
    return EventNormalizer(followed_event_ids).to_output(raw, mode)
