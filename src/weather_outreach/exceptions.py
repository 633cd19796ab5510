"""Custom exceptions for the weather outreach package."""

from __future__ import annotations


class WeatherOutreachError(Exception):
    """Base exception for all weather outreach errors."""


class OpenWeatherConnectionError(WeatherOutreachError):
    """Raised when the client cannot connect to the forecast API."""


class OpenWeatherTimeoutError(WeatherOutreachError):
    """Raised when a request to the forecast API times out."""


class OpenWeatherAPIError(WeatherOutreachError):
    """Raised when the forecast API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class OpenWeatherValidationError(WeatherOutreachError):
    """Raised when forecast response data fails model validation."""


class MalformedInputError(WeatherOutreachError):
    """Raised when an observation sequence cannot be aggregated.

    Covers empty sequences, records out of chronological order and records
    whose fields cannot be parsed. No partial result is produced.
    """


class ConfigurationError(WeatherOutreachError):
    """Raised when required configuration is missing or invalid."""
