"""
Tests for the base QueryableCollection and shared helpers.

Domain collections are exercised in their own test modules; these tests
cover the generic filtering, slicing and grouping behavior.
"""

import pytest
from datetime import datetime, timezone, timedelta

from stationwx import config
from stationwx.clock import as_utc, resolve_now
from stationwx.models.queryable_collection import QueryableCollection
from stationwx.advisories.collection import PirepCollection
from stationwx.advisories.models import TurbulenceIntensity


class TestQueryableCollection:
    """Test base QueryableCollection functionality."""

    def test_where_attribute_matching(self, make_pirep):
        """Test filtering with attribute matching."""
        pireps = PirepCollection([
            make_pirep(id="a", icao="KJFK"),
            make_pirep(id="b", icao="KBOS", turbulence=TurbulenceIntensity.SEVERE),
        ])

        result = pireps.where(icao="KBOS", turbulence=TurbulenceIntensity.SEVERE).first()
        assert result is not None
        assert result.id == "b"
        assert pireps.where(icao="EGLL").first() is None

    def test_first_last_empty(self):
        collection = QueryableCollection([])
        assert collection.first() is None
        assert collection.last() is None
        assert collection.exists() is False
        assert not collection

    def test_accepts_iterables(self):
        collection = QueryableCollection(x for x in range(5))
        assert collection.count() == 5
        assert collection.any(lambda x: x > 3) is True

    def test_order_by_and_take(self):
        collection = QueryableCollection([3, 1, 2])
        assert collection.order_by(lambda x: x).all() == [1, 2, 3]
        assert collection.order_by(lambda x: x, reverse=True).take(2).all() == [3, 2]

    def test_slicing_keeps_class(self, make_pirep):
        pireps = PirepCollection([make_pirep(id="a"), make_pirep(id="b")])
        assert isinstance(pireps[:1], PirepCollection)
        assert pireps[1].id == "b"

    def test_group_by_keeps_order(self):
        groups = QueryableCollection([1, 2, 3, 4]).group_by(lambda x: x % 2)
        assert groups == {1: [1, 3], 0: [2, 4]}


class TestClock:
    """Test UTC normalization of supplied times."""

    def test_naive_taken_as_utc(self):
        assert as_utc(datetime(2024, 3, 29, 12, 0)).tzinfo == timezone.utc

    def test_aware_converted(self):
        offset = timezone(timedelta(hours=-4))
        value = as_utc(datetime(2024, 3, 29, 8, 0, tzinfo=offset))
        assert value == datetime(2024, 3, 29, 12, 0, tzinfo=timezone.utc)
        assert value.tzinfo == timezone.utc

    def test_resolve_now(self, now):
        assert resolve_now(now) == now
        assert resolve_now().tzinfo == timezone.utc


class TestEnvConfig:
    """Test environment overrides of tunable defaults."""

    def test_env_value_used(self, monkeypatch):
        monkeypatch.setenv("STATIONWX_TEST_VALUE", "750")
        assert config._env_float("STATIONWX_TEST_VALUE", 500.0) == 750.0

    @pytest.mark.parametrize("raw", ["abc", "-1", "nan"])
    def test_bad_env_value_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("STATIONWX_TEST_VALUE", raw)
        assert config._env_float("STATIONWX_TEST_VALUE", 500.0) == 500.0

    def test_missing_env_value(self, monkeypatch):
        monkeypatch.delenv("STATIONWX_TEST_VALUE", raising=False)
        assert config._env_float("STATIONWX_TEST_VALUE", 1.0) == 1.0
