"""Observation record model."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ObservationRecord(BaseModel):
    """One forecast reading at a point in time (temperature in Fahrenheit)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    timestamp: datetime
    temperature: int | float
    condition_label: str = Field(min_length=1)

    @property
    def calendar_day(self) -> date:
        """Date component of the timestamp, time-of-day discarded."""
        return self.timestamp.date()
