"""Tests for the query parameter builder."""

from __future__ import annotations

import pytest

from weather_outreach._params import Location, build_query_params


class TestLocation:
    def test_city_and_country(self) -> None:
        assert Location("Minneapolis", "us").to_params() == [("q", "Minneapolis,us")]

    def test_city_only(self) -> None:
        assert Location("London").to_params() == [("q", "London")]

    def test_empty_country_is_omitted(self) -> None:
        assert Location("London", "").to_params() == [("q", "London")]

    def test_str(self) -> None:
        assert str(Location("Minneapolis", "us")) == "Minneapolis,us"

    def test_frozen(self) -> None:
        loc = Location("Minneapolis", "us")
        with pytest.raises(AttributeError):
            loc.city = "Duluth"  # type: ignore[misc]


class TestBuildQueryParams:
    def test_simple_values(self) -> None:
        params = build_query_params(appid="abc", units="imperial")
        assert params == [("appid", "abc"), ("units", "imperial")]

    def test_location_expands_to_q(self) -> None:
        params = build_query_params(location=Location("Minneapolis", "us"), appid="abc")
        assert ("q", "Minneapolis,us") in params
        assert ("appid", "abc") in params
        assert len(params) == 2

    def test_none_values_skipped(self) -> None:
        params = build_query_params(appid="abc", cnt=None)
        assert params == [("appid", "abc")]

    def test_numbers_stringified(self) -> None:
        assert build_query_params(cnt=40) == [("cnt", "40")]

    def test_empty_params(self) -> None:
        assert build_query_params() == []
