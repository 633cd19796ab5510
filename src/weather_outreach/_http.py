"""Low-level HTTP transport layer wrapping httpx.

OpenWeatherMap authenticates with an ``appid`` query parameter rather than a
header, so the transports send no credentials of their own; callers include
the key in ``params``. Forecast endpoints answer with a single JSON object,
and errors carry a JSON body with ``cod`` and ``message`` that is kept
verbatim in ``OpenWeatherAPIError.message``.
"""

from __future__ import annotations

from typing import Any

import httpx

from weather_outreach.exceptions import (
    OpenWeatherAPIError,
    OpenWeatherConnectionError,
    OpenWeatherTimeoutError,
    OpenWeatherValidationError,
)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return the parsed JSON object."""
    if response.status_code >= 400:
        raise OpenWeatherAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise OpenWeatherValidationError(f"Response body is not JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise OpenWeatherValidationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    return data


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """GET an endpoint (with ``appid`` among ``params``) and return the JSON object."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise OpenWeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise OpenWeatherTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Async GET an endpoint (with ``appid`` among ``params``) and return the JSON object."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise OpenWeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise OpenWeatherTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
