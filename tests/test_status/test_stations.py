"""Tests for station identifier handling."""

import pytest

from stationwx.validation import InvalidStationError, StationWxError
from stationwx.status.stations import (
    validate_icao,
    is_valid_icao,
    parse_station_list,
    station_name,
)


class TestValidateIcao:
    """Test ICAO code validation."""

    @pytest.mark.parametrize("code,expected", [
        ("KJFK", "KJFK"),
        ("egll", "EGLL"),
        ("  kord ", "KORD"),
        ("K0B8", "K0B8"),
    ])
    def test_valid(self, code, expected):
        assert validate_icao(code) == expected

    @pytest.mark.parametrize("code", ["KJF", "KJFKX", "KJ K", "KJ-K", "", None, 1234])
    def test_invalid(self, code):
        with pytest.raises(InvalidStationError) as exc_info:
            validate_icao(code)
        assert exc_info.value.code == code

    def test_error_hierarchy_and_message(self):
        with pytest.raises(StationWxError) as exc_info:
            validate_icao("KJF")
        assert isinstance(exc_info.value, ValueError)
        assert str(exc_info.value) == "Invalid ICAO code: 'KJF'"

    def test_is_valid_icao(self):
        assert is_valid_icao("kjfk") is True
        assert is_valid_icao("jfk") is False


class TestParseStationList:
    """Test parsing user-entered station lists."""

    def test_mixed_separators(self):
        assert parse_station_list("kjfk, EGLL  KORD\nklax") == ["KJFK", "EGLL", "KORD", "KLAX"]

    def test_drops_invalid_and_duplicates(self):
        assert parse_station_list("KJFK,JFK,kjfk,TOOLONG,EGLL") == ["KJFK", "EGLL"]

    @pytest.mark.parametrize("text", ["", "  ,, ", None])
    def test_empty(self, text):
        assert parse_station_list(text) == []


class TestStationName:
    """Test display name lookup."""

    def test_known(self):
        assert station_name("KJFK") == "John F Kennedy Intl"
        assert station_name("egll") == "London Heathrow"

    def test_unknown_falls_back_to_code(self):
        assert station_name("LFPG") == "LFPG"
