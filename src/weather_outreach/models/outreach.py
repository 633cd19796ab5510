"""Weather label and outreach method enumerations."""

from __future__ import annotations

from enum import Enum

# Only these two sky conditions influence the day's weather label.
RAIN_LABEL = "Rain"
CLEAR_LABEL = "Clear"


class WeatherLabel(str, Enum):
    """Summarised sky condition for a whole calendar day."""

    SUNNY = "Sunny"
    RAINY = "Rainy"
    NOT_SUNNY = "Not Sunny"


class OutreachMethod(str, Enum):
    """Recommended customer-contact channel for a day."""

    TEXT_MESSAGE = "Text Message"
    EMAIL = "Email"
    PHONE_CALL = "Phone Call"
    UNKNOWN = "Unknown"


ForecastResult = dict[str, OutreachMethod]
