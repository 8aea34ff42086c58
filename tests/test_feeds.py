"""Tests for the ready-made event feeds."""

import asyncio
import random
from datetime import date
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest

from concert_finder.config.loader import SearchConfig, load_search_config
from concert_finder.feeds import (
    RECOMMENDED_FETCH_SIZE,
    RECOMMENDED_LIMIT,
    Viewer,
    artist_events,
    event_detail,
    event_feed,
    followed_events,
    keyword_search,
    recommended_events,
    resolve_coordinates,
)
from concert_finder.models import SearchMode, SearchResult
from concert_finder.utils.geolocation import Coordinates

CHICAGO = Coordinates(41.8781, -87.6298)


@pytest.fixture
def config() -> SearchConfig:
    return load_search_config()


@pytest.fixture
def search() -> MagicMock:
    search = MagicMock()
    search.search = AsyncMock(side_effect=lambda intent: SearchResult())
    return search


@pytest.fixture
def member() -> Viewer:
    return Viewer(
        coordinates=CHICAGO,
        authenticated=True,
        followed_artist_ids=["K1", "K2"],
        followed_event_ids=["E1"],
        range_km=80,
    )


def _sent_intent(search: MagicMock):
    return search.search.call_args.args[0]


class TestEventFeed:
    @pytest.mark.asyncio
    async def test_member_gets_followed_artists(
        self, search: MagicMock, member: Viewer, config: SearchConfig
    ) -> None:
        await event_feed(search, member, config, start_date=date(2025, 6, 1))

        intent = _sent_intent(search)
        assert intent.attraction_ids == ["K1", "K2"]
        assert intent.country_code == ""
        assert intent.sort == "date,asc"
        assert intent.start_date == date(2025, 6, 1)
        assert intent.latitude == CHICAGO.latitude
        assert intent.followed_event_ids == {"E1"}

    @pytest.mark.asyncio
    async def test_anonymous_gets_country_browse(
        self, search: MagicMock, config: SearchConfig
    ) -> None:
        viewer = Viewer(coordinates=CHICAGO, followed_event_ids=["E1"])

        await event_feed(search, viewer, config, location_query="Illinois")

        intent = _sent_intent(search)
        assert intent.attraction_ids == []
        assert intent.country_code == "CA,US"
        assert intent.location_query == "Illinois"
        assert intent.followed_event_ids == set()

    @pytest.mark.asyncio
    async def test_member_without_follows_gets_country_browse(
        self, search: MagicMock, config: SearchConfig
    ) -> None:
        viewer = Viewer(coordinates=CHICAGO, authenticated=True)

        await event_feed(search, viewer, config, size=5)

        intent = _sent_intent(search)
        assert intent.country_code == "CA,US"
        assert intent.size == 5


class TestFollowedEvents:
    @pytest.mark.asyncio
    async def test_saved_events_by_id(self, search: MagicMock, member: Viewer) -> None:
        await followed_events(search, member)

        intent = _sent_intent(search)
        assert intent.event_ids == ["E1"]
        assert intent.sort == "date,asc"

    @pytest.mark.asyncio
    async def test_nothing_saved_skips_search(self, search: MagicMock) -> None:
        viewer = Viewer(coordinates=CHICAGO, authenticated=True)

        result = await followed_events(search, viewer)

        assert result.events == []
        search.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_anonymous_skips_search(self, search: MagicMock) -> None:
        viewer = Viewer(coordinates=CHICAGO, followed_event_ids=["E1"])

        result = await followed_events(search, viewer)

        assert result.events == []
        search.search.assert_not_called()


class TestRecommendedEvents:
    @staticmethod
    def _events() -> List[Dict[str, Any]]:
        events = [{"id": f"E{i}", "artistId": f"X{i}"} for i in range(12)]
        events[2]["artistId"] = "K1"
        events[3]["artistId"] = "K2"
        return events

    @pytest.mark.asyncio
    async def test_excludes_followed_and_saved(
        self, search: MagicMock, member: Viewer, config: SearchConfig
    ) -> None:
        search.search.side_effect = lambda intent: SearchResult(events=self._events())

        result = await recommended_events(search, member, config, rng=random.Random(7))

        ids = [e["id"] for e in result.events]
        assert len(ids) == RECOMMENDED_LIMIT
        assert len(set(ids)) == RECOMMENDED_LIMIT
        assert not {"E1", "E2", "E3"} & set(ids)

    @pytest.mark.asyncio
    async def test_member_range_and_distance_sort(
        self, search: MagicMock, member: Viewer, config: SearchConfig
    ) -> None:
        await recommended_events(search, member, config)

        intent = _sent_intent(search)
        assert intent.radius_km == 80
        assert intent.size == RECOMMENDED_FETCH_SIZE
        assert intent.sort == "distance,asc"

    @pytest.mark.asyncio
    async def test_anonymous_uses_configured_radius(
        self, search: MagicMock, config: SearchConfig
    ) -> None:
        search.search.side_effect = lambda intent: SearchResult(events=self._events())
        viewer = Viewer(coordinates=CHICAGO, range_km=5)

        result = await recommended_events(search, viewer, config, rng=random.Random(1))

        assert _sent_intent(search).radius_km == 250
        assert len(result.events) == RECOMMENDED_LIMIT

    @pytest.mark.asyncio
    async def test_fewer_than_limit(
        self, search: MagicMock, member: Viewer, config: SearchConfig
    ) -> None:
        search.search.side_effect = lambda intent: SearchResult(
            events=[{"id": "E9", "artistId": "X9"}, {"id": "E1", "artistId": "X1"}]
        )

        result = await recommended_events(search, member, config)

        assert result.events == [{"id": "E9", "artistId": "X9"}]

    @pytest.mark.asyncio
    async def test_error_passed_through(
        self, search: MagicMock, member: Viewer, config: SearchConfig
    ) -> None:
        search.search.side_effect = lambda intent: SearchResult(error="down")

        result = await recommended_events(search, member, config)

        assert result.error == "down"
        assert result.events == []


class TestSingleSelectorFeeds:
    @pytest.mark.asyncio
    async def test_artist_events(self, search: MagicMock, member: Viewer) -> None:
        await artist_events(search, member, "K9", location_query="IL")

        intent = _sent_intent(search)
        assert intent.attraction_ids == ["K9"]
        assert intent.location_query == "IL"

    @pytest.mark.asyncio
    async def test_keyword_search(self, search: MagicMock, member: Viewer) -> None:
        await keyword_search(search, member, "jazz", size=3)

        intent = _sent_intent(search)
        assert intent.keyword == "jazz"
        assert intent.size == 3
        assert intent.selector() == "keyword"

    @pytest.mark.asyncio
    async def test_event_detail(self, search: MagicMock, member: Viewer) -> None:
        await event_detail(search, member, "E5")

        intent = _sent_intent(search)
        assert intent.event_ids == ["E5"]
        assert intent.size == 1
        assert intent.sort == "distance,asc"
        assert intent.mode == SearchMode.DETAIL


class TestResolveCoordinates:
    @pytest.mark.asyncio
    async def test_no_lookup_uses_default(self, config: SearchConfig) -> None:
        assert await resolve_coordinates(config) == config.default_location

    @pytest.mark.asyncio
    async def test_lookup_result_used(self, config: SearchConfig) -> None:
        async def lookup() -> Coordinates:
            return CHICAGO

        assert await resolve_coordinates(config, lookup) == CHICAGO

    @pytest.mark.asyncio
    async def test_slow_lookup_falls_back(self, config: SearchConfig) -> None:
        async def lookup() -> Coordinates:
            await asyncio.sleep(1)
            return CHICAGO

        result = await resolve_coordinates(config, lookup, timeout=0.01)
        assert result == config.default_location

    @pytest.mark.asyncio
    async def test_failed_lookup_falls_back(self, config: SearchConfig) -> None:
        async def lookup() -> Coordinates:
            raise PermissionError("denied")

        assert await resolve_coordinates(config, lookup) == config.default_location
