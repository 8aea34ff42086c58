"""Unit tests for state name/code resolution."""

import pytest

from concert_finder.utils.region_codes import STATE_CODES, clean_location, resolve_region_code


class TestResolveRegionCode:
    """Test resolve_region_code."""

    def test_full_name_resolves(self) -> None:
        assert resolve_region_code("California") == "CA"

    def test_lowercase_code_resolves(self) -> None:
        assert resolve_region_code("ca") == "CA"

    def test_uppercase_code_resolves(self) -> None:
        assert resolve_region_code("IL") == "IL"

    def test_multi_word_state(self) -> None:
        assert resolve_region_code("New York") == "NY"
        assert resolve_region_code("west virginia") == "WV"

    def test_unknown_returns_none(self) -> None:
        assert resolve_region_code("Nowhereland") is None

    def test_city_returns_none(self) -> None:
        assert resolve_region_code("Chicago") is None

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_returns_none(self, text) -> None:
        assert resolve_region_code(text) is None

    def test_non_alpha_characters_stripped(self) -> None:
        assert resolve_region_code("  Texas! ") == "TX"
        assert resolve_region_code("C.A.") == "CA"

    def test_no_partial_matching(self) -> None:
        assert resolve_region_code("Calif") is None
        assert resolve_region_code("New") is None

    def test_every_code_maps_to_itself(self) -> None:
        for code in STATE_CODES.values():
            assert resolve_region_code(code.lower()) == code

    def test_table_covers_fifty_states(self) -> None:
        assert len(STATE_CODES) == 50
        assert len(set(STATE_CODES.values())) == 50


def test_clean_location_keeps_spaces() -> None:
    assert clean_location(" New-York 10001 ") == "newyork "
    assert clean_location("Rhode Island") == "rhode island"
