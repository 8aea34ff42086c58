"""Main entry point for concert-finder CLI."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from typing import List, Optional, Union

from .config.loader import SearchConfig, load_search_config
from .config.settings import SPOTIFY_ACCESS_TOKEN, get_ticketmaster_api_key
from .models import SearchIntent, SearchMode, SearchResult, SyncedArtist, status_badge
from .providers.spotify import SpotifyClient
from .providers.ticketmaster import TicketmasterClient
from .search.orchestrator import EventSearch
from .sync.artists import sync_followed_artists
from .utils.timezone_utils import format_event_time


def format_events_output(result: SearchResult) -> str:
    """Format a search result for display."""
    output = []

    if result.error:
        output.append(f"❌ Error: {result.error}")
        return "\n".join(output)

    if not result.events:
        if result.spellcheck:
            output.append(
                f"No events found for '{result.original_keyword}'. "
                f"Did you mean '{result.spellcheck}'?"
            )
        else:
            output.append("No events found.")
        return "\n".join(output)

    output.append(f"Found {len(result.events)} events:")
    output.append("")

    current_date = None
    for event in result.events:
        event_date = event.get("date") or "Date TBA"
        if current_date != event_date:
            if current_date is not None:
                output.append("")
            output.append(f"📅 {event_date}")
            current_date = event_date

        time_str = format_event_time(event.get("time", ""))
        time_str = f" {time_str}" if time_str else ""
        badge = status_badge(event.get("status"))
        badge_str = f" [{badge}]" if badge and badge != "onsale" else ""
        star = "⭐ " if event.get("followed") else ""

        output.append(
            f"  🎫 {star}{event.get('name', '')} @ {event.get('venue', '')}{time_str}{badge_str}"
        )
        place = ", ".join(
            part for part in (event.get("city"), event.get("state")) if part
        )
        distance = event.get("distance") or 0
        details = [part for part in (place, f"{distance:g} km") if part]
        if event.get("priceRanges"):
            details.append(event["priceRanges"])
        output.append(f"     {' · '.join(details)}")

    if result.spellcheck:
        output.append("")
        output.append(f"💡 Did you mean '{result.spellcheck}'?")

    return "\n".join(output)


def format_artists_output(artists: List[SyncedArtist]) -> str:
    """Format synced artists for display."""
    if not artists:
        return "No followed artists found."

    output = [f"Synced {len(artists)} artists:", ""]
    for artist in artists:
        if artist.catalog:
            output.append(
                f"  ✅ {artist.name} ({artist.catalog.genre}, "
                f"{artist.catalog.upcoming_events} upcoming)"
            )
        else:
            output.append(f"  ❌ {artist.name} (not found on Ticketmaster)")
    return "\n".join(output)


def date_bound(value: str) -> Union[date, str]:
    """Parse a --start/--end value; plain dates become date objects."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        return value


def build_intent(args: argparse.Namespace, config: SearchConfig) -> SearchIntent:
    """Translate parsed search arguments into a SearchIntent."""
    latitude = args.lat if args.lat is not None else config.default_location.latitude
    longitude = args.lon if args.lon is not None else config.default_location.longitude
    return SearchIntent(
        event_ids=args.event_id or [],
        attraction_ids=args.attraction_id or [],
        keyword=args.keyword or "",
        latitude=latitude,
        longitude=longitude,
        radius_km=args.radius,
        country_code=args.country or "",
        size=args.size,
        sort=args.sort or "",
        start_date=args.start,
        end_date=args.end,
        location_query=args.location or "",
        mode=SearchMode.DETAIL if args.detail else SearchMode.LIST,
    )


async def run_search(args: argparse.Namespace) -> int:
    config = load_search_config(args.config)
    client = TicketmasterClient(config.ticketmaster, api_key=get_ticketmaster_api_key())
    result = await EventSearch(client).search(build_intent(args, config))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_events_output(result))
    return 1 if result.error else 0


async def run_sync_artists(args: argparse.Namespace) -> int:
    token = args.token or SPOTIFY_ACCESS_TOKEN
    if not token:
        print("❌ A Spotify access token is required (--token or SPOTIFY_ACCESS_TOKEN)")
        return 1

    config = load_search_config(args.config)
    spotify = SpotifyClient(config.spotify)
    ticketmaster = TicketmasterClient(
        config.ticketmaster, api_key=get_ticketmaster_api_key()
    )
    artists = await sync_followed_artists(spotify, ticketmaster, token)

    if args.json:
        print(json.dumps([artist.to_dict() for artist in artists], indent=2))
    else:
        print(format_artists_output(artists))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find concerts near you and by the artists you follow"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--config", "-c", help="Path to search configuration JSON file"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print raw JSON instead of a listing"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search for events")
    search.add_argument("keyword", nargs="?", help="Search keyword")
    search.add_argument(
        "--event-id", action="append", help="Event ID (repeatable, overrides other selectors)"
    )
    search.add_argument(
        "--attraction-id", action="append", help="Artist/attraction ID (repeatable)"
    )
    search.add_argument("--lat", type=float, help="Latitude for distance calculation")
    search.add_argument("--lon", type=float, help="Longitude for distance calculation")
    search.add_argument("--radius", type=int, help="Search radius in km")
    search.add_argument("--country", help='Country code filter, e.g. "US" or "CA,US"')
    search.add_argument("--size", type=float, default=20, help="Number of results (1-9999)")
    search.add_argument("--sort", default="date,asc", help='Sort order, e.g. "distance,asc"')
    search.add_argument(
        "--start", type=date_bound, help="Start date (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS)"
    )
    search.add_argument(
        "--end", type=date_bound, help="End date (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS)"
    )
    search.add_argument("--location", help="City or state to search in")
    search.add_argument(
        "--detail", action="store_true", help="Return all event fields"
    )

    sync = subparsers.add_parser(
        "sync-artists", help="Match followed Spotify artists with Ticketmaster"
    )
    sync.add_argument("--token", help="Spotify access token")

    return parser


async def async_main(args: argparse.Namespace) -> int:
    """Async main entry point."""
    if args.command == "search":
        return await run_search(args)
    return await run_sync_artists(args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        return asyncio.run(async_main(args))
    except Exception as e:
        print(f"Critical Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
