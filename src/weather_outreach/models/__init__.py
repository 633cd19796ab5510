"""Weather outreach data models."""

from weather_outreach.models.forecast import City, Condition, ForecastEntry, ForecastResponse, MainReading
from weather_outreach.models.observation import ObservationRecord
from weather_outreach.models.outreach import (
    CLEAR_LABEL,
    RAIN_LABEL,
    ForecastResult,
    OutreachMethod,
    WeatherLabel,
)
from weather_outreach.models.summary import DaySummary

__all__ = [
    "CLEAR_LABEL",
    "City",
    "Condition",
    "DaySummary",
    "ForecastEntry",
    "ForecastResponse",
    "ForecastResult",
    "MainReading",
    "ObservationRecord",
    "OutreachMethod",
    "RAIN_LABEL",
    "WeatherLabel",
]
