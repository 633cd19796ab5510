"""weather-outreach — pick a daily customer outreach channel from the weather forecast."""

from weather_outreach._params import Location
from weather_outreach.aggregator import aggregate_forecast, anomalous_days
from weather_outreach.classifier import classify
from weather_outreach.client import AsyncOpenWeatherClient, OpenWeatherClient
from weather_outreach.config import OutreachConfig, load_config
from weather_outreach.exceptions import (
    ConfigurationError,
    MalformedInputError,
    OpenWeatherAPIError,
    OpenWeatherConnectionError,
    OpenWeatherTimeoutError,
    OpenWeatherValidationError,
    WeatherOutreachError,
)
from weather_outreach.models import ForecastResult, ObservationRecord, OutreachMethod, WeatherLabel
from weather_outreach.service import AsyncOutreachPlanner, OutreachPlanner

__all__ = [
    "AsyncOpenWeatherClient",
    "AsyncOutreachPlanner",
    "ConfigurationError",
    "ForecastResult",
    "Location",
    "MalformedInputError",
    "ObservationRecord",
    "OpenWeatherAPIError",
    "OpenWeatherClient",
    "OpenWeatherConnectionError",
    "OpenWeatherTimeoutError",
    "OpenWeatherValidationError",
    "OutreachConfig",
    "OutreachMethod",
    "OutreachPlanner",
    "WeatherLabel",
    "WeatherOutreachError",
    "aggregate_forecast",
    "anomalous_days",
    "classify",
    "load_config",
]

__version__ = "0.1.0"
