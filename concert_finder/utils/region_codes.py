"""US state name / code lookup for free-text location searches."""

import re
from typing import Dict, Optional

_NON_ALPHA = re.compile(r"[^a-z\s]")

STATE_CODES: Dict[str, str] = {
    "alabama": "AL",
    "alaska": "AK",
    "arizona": "AZ",
    "arkansas": "AR",
    "california": "CA",
    "colorado": "CO",
    "connecticut": "CT",
    "delaware": "DE",
    "florida": "FL",
    "georgia": "GA",
    "hawaii": "HI",
    "idaho": "ID",
    "illinois": "IL",
    "indiana": "IN",
    "iowa": "IA",
    "kansas": "KS",
    "kentucky": "KY",
    "louisiana": "LA",
    "maine": "ME",
    "maryland": "MD",
    "massachusetts": "MA",
    "michigan": "MI",
    "minnesota": "MN",
    "mississippi": "MS",
    "missouri": "MO",
    "montana": "MT",
    "nebraska": "NE",
    "nevada": "NV",
    "new hampshire": "NH",
    "new jersey": "NJ",
    "new mexico": "NM",
    "new york": "NY",
    "north carolina": "NC",
    "north dakota": "ND",
    "ohio": "OH",
    "oklahoma": "OK",
    "oregon": "OR",
    "pennsylvania": "PA",
    "rhode island": "RI",
    "south carolina": "SC",
    "south dakota": "SD",
    "tennessee": "TN",
    "texas": "TX",
    "utah": "UT",
    "vermont": "VT",
    "virginia": "VA",
    "washington": "WA",
    "west virginia": "WV",
    "wisconsin": "WI",
    "wyoming": "WY",
}

# Codes resolve to themselves ("ca" -> "CA")
_LOOKUP: Dict[str, str] = dict(STATE_CODES)
_LOOKUP.update({code.lower(): code for code in STATE_CODES.values()})


def clean_location(text: str) -> str:
    """Lowercase and strip everything but letters and spaces."""
    return _NON_ALPHA.sub("", text.strip().lower())


def resolve_region_code(text: Optional[str]) -> Optional[str]:
    """
    Resolve a state name or code to its two-letter code.

    Matching is exact on the cleaned string; there is no fuzzy matching.

    Args:
        text: Free-text location, e.g. "California", "ca", "New York"

    Returns:
        Uppercase state code (e.g. "CA"), or None if the text is not a state
    """
    if not text:
        return None
    return _LOOKUP.get(clean_location(text))
