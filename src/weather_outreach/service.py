"""Service layer: fetch a forecast and turn it into an outreach plan."""

from __future__ import annotations

from weather_outreach._logging import get_logger, log_service_call
from weather_outreach._params import Location
from weather_outreach.aggregator import aggregate_forecast, anomalous_days
from weather_outreach.client import AsyncOpenWeatherClient, OpenWeatherClient
from weather_outreach.models.observation import ObservationRecord
from weather_outreach.models.outreach import ForecastResult


def _plan_from_records(location: Location, records: list[ObservationRecord]) -> ForecastResult:
    """Aggregate the records and log any day no outreach rule covers."""
    result = aggregate_forecast(records)
    for day in anomalous_days(result):
        get_logger().warning("ANOMALY: %s %s matches no outreach rule", location, day)
    return result


class OutreachPlanner:
    """Per-day outreach plan for one location, backed by a synchronous client.

    Transport errors from the client propagate unchanged. An empty forecast
    surfaces as ``MalformedInputError``.
    """

    def __init__(self, client: OpenWeatherClient) -> None:
        self._client = client

    @log_service_call
    def plan(self, location: Location) -> ForecastResult:
        return _plan_from_records(location, self._client.forecast(location))


class AsyncOutreachPlanner:
    """Asynchronous counterpart of ``OutreachPlanner``."""

    def __init__(self, client: AsyncOpenWeatherClient) -> None:
        self._client = client

    @log_service_call
    async def plan(self, location: Location) -> ForecastResult:
        records = await self._client.forecast(location)
        return _plan_from_records(location, records)
