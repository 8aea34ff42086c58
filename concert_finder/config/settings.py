"""Environment settings for upstream provider access.

Values come from the process environment, with a local .env file loaded
first when present.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv(override=True)

logger = logging.getLogger(__name__)

TICKETMASTER_API_KEY = os.getenv("TICKETMASTER_API_KEY", "")
TICKETMASTER_BASE_URL = os.getenv(
    "TICKETMASTER_BASE_URL", "https://app.ticketmaster.com/discovery/v2"
)
SPOTIFY_BASE_URL = os.getenv("SPOTIFY_BASE_URL", "https://api.spotify.com/v1")
SPOTIFY_ACCESS_TOKEN = os.getenv("SPOTIFY_ACCESS_TOKEN", "")
PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "15"))


def get_ticketmaster_api_key() -> str:
    """
    Return the Ticketmaster API key.

    Raises:
        RuntimeError: If TICKETMASTER_API_KEY is not set
    """
    api_key = os.getenv("TICKETMASTER_API_KEY") or TICKETMASTER_API_KEY
    if not api_key:
        raise RuntimeError(
            "Missing TICKETMASTER_API_KEY. Set it in the environment or .env file."
        )
    return api_key
