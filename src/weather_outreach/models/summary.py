"""Per-day forecast summary model."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from weather_outreach.models.outreach import WeatherLabel


def truncating_average(total: int | float, count: int) -> int:
    """Integer mean of ``total / count``, truncated toward zero (never rounded)."""
    quotient = int(abs(total) // count)
    return -quotient if total < 0 else quotient


class DaySummary(BaseModel):
    """Accumulated statistics for every observation sharing a calendar day."""

    model_config = ConfigDict(frozen=True)

    calendar_day: date
    temperature_sum: int | float
    sample_count: int = Field(ge=1)
    saw_rain: bool = False
    saw_clear: bool = False

    @property
    def day_key(self) -> str:
        """Day identifier in ``YYYY-MM-DD`` form."""
        return self.calendar_day.isoformat()

    @property
    def average_temperature(self) -> int:
        return truncating_average(self.temperature_sum, self.sample_count)

    @property
    def weather_label(self) -> WeatherLabel:
        """Clear beats rain: any clear reading makes the day Sunny."""
        if self.saw_clear:
            return WeatherLabel.SUNNY
        if self.saw_rain:
            return WeatherLabel.RAINY
        return WeatherLabel.NOT_SUNNY
