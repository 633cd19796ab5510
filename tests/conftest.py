"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

import pytest

from weather_outreach import _logging
from weather_outreach.models.observation import ObservationRecord

BASE_URL = "https://api.openweathermap.org/data/2.5"
API_KEY = "test-key"

SAMPLE_ENTRY = {
    "dt": 1572015600,
    "main": {
        "temp": 48.2,
        "feels_like": 41.7,
        "temp_min": 47.1,
        "temp_max": 48.2,
        "humidity": 71,
    },
    "weather": [
        {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"},
    ],
    "clouds": {"all": 90},
    "wind": {"speed": 11.2, "deg": 310},
    "dt_txt": "2019-10-25 15:00:00",
}


def make_entry(dt_txt: str, temp: float, condition: str = "Clouds") -> dict:
    return {
        "main": {"temp": temp},
        "weather": [{"main": condition, "description": condition.lower()}],
        "dt_txt": dt_txt,
    }


def make_payload(entries: list[dict]) -> dict:
    return {
        "cod": "200",
        "message": 0,
        "cnt": len(entries),
        "list": entries,
        "city": {"id": 5037649, "name": "Minneapolis", "country": "US", "timezone": -18000},
    }


SAMPLE_FORECAST = make_payload([
    make_entry("2019-10-25 18:00:00", 50, "Clouds"),
    make_entry("2019-10-25 21:00:00", 52, "Rain"),
    make_entry("2019-10-26 00:00:00", 78, "Clear"),
    make_entry("2019-10-26 03:00:00", 80, "Clear"),
])


def make_record(timestamp: datetime, temperature: float, label: str = "Clouds") -> ObservationRecord:
    return ObservationRecord(timestamp=timestamp, temperature=temperature, condition_label=label)


def five_day_forecast() -> list[ObservationRecord]:
    """Five days of eight three-hour readings each.

    Day 3 averages exactly 80 and is all Clear; day 4 averages 50 with mixed
    labels. Days 1, 2 and 5 are mild and cloudy.
    """
    start = datetime(2019, 10, 25)
    daily: list[tuple[list[float], list[str]]] = [
        ([60, 62, 64, 66, 68, 66, 64, 62], ["Clouds"] * 8),
        ([58, 60, 62, 64, 66, 64, 62, 60], ["Clouds"] * 8),
        ([74, 76, 78, 82, 86, 84, 80, 80], ["Clear"] * 8),
        ([46, 48, 50, 52, 54, 52, 50, 48], ["Rain", "Clouds", "Snow", "Rain", "Clouds", "Mist", "Rain", "Clouds"]),
        ([62, 64, 66, 68, 70, 68, 66, 64], ["Clouds"] * 8),
    ]
    records = []
    for day_index, (temps, labels) in enumerate(daily):
        for slot, (temp, label) in enumerate(zip(temps, labels)):
            ts = start + timedelta(days=day_index, hours=3 * slot)
            records.append(make_record(ts, temp, label))
    return records


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture(autouse=True)
def _log_to_tmp_path(tmp_path, monkeypatch):
    """Redirect the call log to tmp_path and reset the cached logger."""
    named_logger = logging.getLogger(_logging.LOGGER_NAME)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)

    monkeypatch.setattr(_logging, "_logger", None)
    monkeypatch.setattr(_logging, "_LOG_DIR", str(tmp_path))

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
