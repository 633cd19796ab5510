"""OpenWeatherMap 5-day / 3-hour forecast response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from weather_outreach.models.observation import ObservationRecord


class MainReading(BaseModel):
    """The ``main`` block of a forecast entry."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temp: int | float
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    humidity: int | None = None


class Condition(BaseModel):
    """One element of the ``weather`` array."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    main: str
    description: str | None = None


class ForecastEntry(BaseModel):
    """A single three-hour slot of the forecast."""

    model_config = ConfigDict(frozen=True)

    dt: int | None = None
    dt_txt: datetime
    main: MainReading
    weather: list[Condition] = Field(min_length=1)

    def to_observation(self) -> ObservationRecord:
        """Convert to an observation using the first reported condition."""
        return ObservationRecord(
            timestamp=self.dt_txt,
            temperature=self.main.temp,
            condition_label=self.weather[0].main,
        )


class City(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    country: str | None = None
    timezone: int | None = None


class ForecastResponse(BaseModel):
    """Top-level forecast payload."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cod: str | None = None
    cnt: int | None = None
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")
    city: City | None = None

    def observations(self) -> list[ObservationRecord]:
        """Observations in payload order."""
        return [entry.to_observation() for entry in self.entries]
