"""
Runtime configuration.

Load order (each layer overrides the previous):
  1. Field defaults on ``OutreachConfig``
  2. ``.env``                 — local secrets (gitignored)
  3. Environment variables    — ``OPENWEATHER_API_KEY`` and ``WEATHER_OUTREACH_*``
  4. Explicit keyword overrides passed to ``load_config``

The API key is never compiled in; a missing key is a ``ConfigurationError``.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from weather_outreach._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from weather_outreach._params import Location
from weather_outreach.exceptions import ConfigurationError

_ENV_VARS: dict[str, str] = {
    "api_key": "OPENWEATHER_API_KEY",
    "city": "WEATHER_OUTREACH_CITY",
    "country_code": "WEATHER_OUTREACH_COUNTRY",
    "units": "WEATHER_OUTREACH_UNITS",
    "base_url": "WEATHER_OUTREACH_BASE_URL",
    "timeout": "WEATHER_OUTREACH_TIMEOUT",
}


class OutreachConfig(BaseModel):
    """Forecast source and location settings."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    city: str = "Minneapolis"
    country_code: str | None = "us"
    units: str = "imperial"
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("api_key", "city")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @property
    def location(self) -> Location:
        return Location(self.city, self.country_code)


def load_config(dotenv_path: str | None = None, **overrides: Any) -> OutreachConfig:
    """Build an ``OutreachConfig`` from ``.env``, the environment and overrides.

    Args:
        dotenv_path: Optional explicit ``.env`` file; defaults to searching
                     from the working directory.
        **overrides: Field values that win over the environment. ``None``
                     values are ignored.

    Raises:
        ConfigurationError: if the API key is missing or a value is invalid.
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)

    values: dict[str, Any] = {}
    for field, env_var in _ENV_VARS.items():
        raw = os.environ.get(env_var)
        if raw:
            values[field] = raw
    values.update({k: v for k, v in overrides.items() if v is not None})

    if not values.get("api_key"):
        raise ConfigurationError(
            f"No API key configured; set {_ENV_VARS['api_key']} or pass api_key"
        )
    try:
        return OutreachConfig(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
