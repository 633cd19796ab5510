"""Map a day's average temperature and weather label to an outreach method."""

from __future__ import annotations

from weather_outreach.models.outreach import OutreachMethod, WeatherLabel

HOT_THRESHOLD = 75
COLD_THRESHOLD = 55


def classify(average_temperature: int | float, weather_label: WeatherLabel) -> OutreachMethod:
    """Return the outreach method for a day.

    Rules are evaluated top to bottom and the first match wins:

    1. warmer than 75 and sunny -> text message
    2. colder than 55 or rainy -> phone call
    3. strictly between 55 and 75 -> email

    Exactly 55 or 75 on a day that is neither sunny nor rainy matches no rule
    and yields ``OutreachMethod.UNKNOWN``.
    """
    if average_temperature > HOT_THRESHOLD and weather_label == WeatherLabel.SUNNY:
        return OutreachMethod.TEXT_MESSAGE
    if average_temperature < COLD_THRESHOLD or weather_label == WeatherLabel.RAINY:
        return OutreachMethod.PHONE_CALL
    if COLD_THRESHOLD < average_temperature < HOT_THRESHOLD:
        return OutreachMethod.EMAIL
    return OutreachMethod.UNKNOWN
