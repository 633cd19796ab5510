"""Public client classes for the OpenWeatherMap forecast API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from weather_outreach._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from weather_outreach._logging import log_api_call
from weather_outreach._params import Location, build_query_params
from weather_outreach.exceptions import OpenWeatherValidationError
from weather_outreach.models.forecast import ForecastResponse
from weather_outreach.models.observation import ObservationRecord

FORECAST_ENDPOINT = "/forecast"
DEFAULT_UNITS = "imperial"


def _decode_forecast(data: dict[str, Any]) -> list[ObservationRecord]:
    """Validate a forecast payload and convert it to observations."""
    try:
        response = ForecastResponse.model_validate(data)
    except ValidationError as exc:
        raise OpenWeatherValidationError(
            f"Failed to validate forecast response: {exc}"
        ) from exc
    return response.observations()


class OpenWeatherClient:
    """Synchronous client for the OpenWeatherMap forecast API.

    Usage:
        client = OpenWeatherClient(api_key="...")
        records = client.forecast(Location("Minneapolis", "us"))
        client.close()

        # Or as a context manager:
        with OpenWeatherClient(api_key="...") as client:
            records = client.forecast(Location("Minneapolis", "us"))
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = DEFAULT_UNITS,
    ) -> None:
        self._api_key = api_key
        self._units = units
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OpenWeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def forecast_payload(self, location: Location) -> dict[str, Any]:
        """Get the raw 5-day / 3-hour forecast JSON for a location."""
        params = build_query_params(location=location, appid=self._api_key, units=self._units)
        return self._transport.get(FORECAST_ENDPOINT, params)

    @log_api_call
    def forecast(self, location: Location) -> list[ObservationRecord]:
        """Get the forecast for a location as chronologically ordered observations."""
        return _decode_forecast(self.forecast_payload(location))


class AsyncOpenWeatherClient:
    """Asynchronous client for the OpenWeatherMap forecast API.

    Usage:
        async with AsyncOpenWeatherClient(api_key="...") as client:
            records = await client.forecast(Location("Minneapolis", "us"))
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = DEFAULT_UNITS,
    ) -> None:
        self._api_key = api_key
        self._units = units
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncOpenWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def forecast_payload(self, location: Location) -> dict[str, Any]:
        """Get the raw 5-day / 3-hour forecast JSON for a location."""
        params = build_query_params(location=location, appid=self._api_key, units=self._units)
        return await self._transport.get(FORECAST_ENDPOINT, params)

    @log_api_call
    async def forecast(self, location: Location) -> list[ObservationRecord]:
        """Get the forecast for a location as chronologically ordered observations."""
        return _decode_forecast(await self.forecast_payload(location))
