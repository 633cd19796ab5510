"""Tests for the HTTP transport layer."""

from __future__ import annotations

import httpx
import pytest
import respx

from weather_outreach._http import AsyncTransport, SyncTransport
from weather_outreach.exceptions import (
    OpenWeatherAPIError,
    OpenWeatherConnectionError,
    OpenWeatherTimeoutError,
    OpenWeatherValidationError,
)

BASE_URL = "https://api.openweathermap.org/data/2.5"


class TestSyncTransport:
    @respx.mock
    def test_get_success(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, json={"cod": "200", "list": []})
        )
        transport = SyncTransport()
        result = transport.get("/forecast", [("q", "Minneapolis,us")])
        assert result == {"cod": "200", "list": []}
        transport.close()

    @respx.mock
    def test_get_with_params(self) -> None:
        route = respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, json={})
        )
        transport = SyncTransport()
        transport.get("/forecast", [("q", "Minneapolis,us"), ("units", "imperial")])
        assert route.called
        params = route.calls.last.request.url.params
        assert params["q"] == "Minneapolis,us"
        assert params["units"] == "imperial"
        transport.close()

    @respx.mock
    def test_get_401(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(401, text="Invalid API key")
        )
        transport = SyncTransport()
        with pytest.raises(OpenWeatherAPIError) as exc_info:
            transport.get("/forecast", [])
        assert exc_info.value.status_code == 401
        assert "Invalid API key" in str(exc_info.value)
        transport.close()

    @respx.mock
    def test_get_500(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )
        transport = SyncTransport()
        with pytest.raises(OpenWeatherAPIError) as exc_info:
            transport.get("/forecast", [])
        assert exc_info.value.status_code == 500
        transport.close()

    @respx.mock
    def test_non_json_body(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )
        transport = SyncTransport()
        with pytest.raises(OpenWeatherValidationError):
            transport.get("/forecast", [])
        transport.close()

    @respx.mock
    def test_non_object_body(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, json=[{"dt_txt": "2019-10-25 09:00:00"}])
        )
        transport = SyncTransport()
        with pytest.raises(OpenWeatherValidationError, match="Expected a JSON object"):
            transport.get("/forecast", [])
        transport.close()

    @respx.mock
    def test_connection_error(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(side_effect=httpx.ConnectError("fail"))
        transport = SyncTransport()
        with pytest.raises(OpenWeatherConnectionError):
            transport.get("/forecast", [])
        transport.close()

    @respx.mock
    def test_timeout_error(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(side_effect=httpx.ReadTimeout("timeout"))
        transport = SyncTransport()
        with pytest.raises(OpenWeatherTimeoutError):
            transport.get("/forecast", [])
        transport.close()


class TestAsyncTransport:
    @respx.mock
    @pytest.mark.asyncio
    async def test_get_success(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, json={"cod": "200", "list": []})
        )
        transport = AsyncTransport()
        result = await transport.get("/forecast", [("q", "Minneapolis,us")])
        assert result == {"cod": "200", "list": []}
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_get_404(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(404, text="city not found")
        )
        transport = AsyncTransport()
        with pytest.raises(OpenWeatherAPIError) as exc_info:
            await transport.get("/forecast", [])
        assert exc_info.value.status_code == 404
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(side_effect=httpx.ConnectError("fail"))
        transport = AsyncTransport()
        with pytest.raises(OpenWeatherConnectionError):
            await transport.get("/forecast", [])
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_timeout_error(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(side_effect=httpx.ReadTimeout("timeout"))
        transport = AsyncTransport()
        with pytest.raises(OpenWeatherTimeoutError):
            await transport.get("/forecast", [])
        await transport.close()
