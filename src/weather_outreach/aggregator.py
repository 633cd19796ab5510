"""Group forecast observations by calendar day and pick an outreach method per day."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from itertools import groupby
from typing import Any

from pydantic import ValidationError

from weather_outreach.classifier import classify
from weather_outreach.exceptions import MalformedInputError
from weather_outreach.models.observation import ObservationRecord
from weather_outreach.models.outreach import CLEAR_LABEL, RAIN_LABEL, ForecastResult, OutreachMethod
from weather_outreach.models.summary import DaySummary


def _coerce_records(
    records: Iterable[ObservationRecord | Mapping[str, Any]],
) -> list[ObservationRecord]:
    """Validate the input into an ordered, non-empty list of observations."""
    coerced: list[ObservationRecord] = []
    for index, record in enumerate(records):
        if isinstance(record, ObservationRecord):
            coerced.append(record)
            continue
        try:
            coerced.append(ObservationRecord.model_validate(record))
        except ValidationError as exc:
            raise MalformedInputError(f"Observation {index} is malformed: {exc}") from exc

    if not coerced:
        raise MalformedInputError("Observation sequence is empty")

    for index, (previous, current) in enumerate(zip(coerced, coerced[1:]), start=1):
        try:
            out_of_order = current.timestamp < previous.timestamp
        except TypeError as exc:
            raise MalformedInputError(
                f"Observation {index} mixes time-zone-aware and naive timestamps"
            ) from exc
        if out_of_order:
            raise MalformedInputError(
                f"Observation {index} ({current.timestamp.isoformat()}) is earlier "
                f"than the one before it ({previous.timestamp.isoformat()})"
            )
    return coerced


def group_by_day(
    records: Iterable[ObservationRecord],
) -> list[tuple[date, list[ObservationRecord]]]:
    """Partition chronologically ordered records into runs sharing a calendar day."""
    return [
        (day, list(day_records))
        for day, day_records in groupby(records, key=lambda r: r.calendar_day)
    ]


def summarize_day(day: date, records: Iterable[ObservationRecord]) -> DaySummary:
    """Fold one day's observations into a summary.

    A record can set at most one of the rain/clear flags; a day only gets
    both when it contains both kinds of readings.
    """
    temperature_sum: int | float = 0
    sample_count = 0
    saw_rain = False
    saw_clear = False
    for record in records:
        temperature_sum += record.temperature
        sample_count += 1
        if record.condition_label == RAIN_LABEL:
            saw_rain = True
        elif record.condition_label == CLEAR_LABEL:
            saw_clear = True

    return DaySummary(
        calendar_day=day,
        temperature_sum=temperature_sum,
        sample_count=sample_count,
        saw_rain=saw_rain,
        saw_clear=saw_clear,
    )


def summarize_forecast(
    records: Iterable[ObservationRecord | Mapping[str, Any]],
) -> list[DaySummary]:
    """Validate the observations and return one summary per calendar day."""
    observations = _coerce_records(records)
    return [summarize_day(day, day_records) for day, day_records in group_by_day(observations)]


def aggregate_forecast(
    records: Iterable[ObservationRecord | Mapping[str, Any]],
) -> ForecastResult:
    """Return the outreach method for every calendar day in the forecast.

    Keys are ``YYYY-MM-DD`` strings in chronological order. Days whose
    summary falls between the classifier rules are kept as
    ``OutreachMethod.UNKNOWN``; see ``anomalous_days``. Performs no I/O.

    Raises:
        MalformedInputError: if the sequence is empty, out of order, or
            contains a record that cannot be parsed.
    """
    result: ForecastResult = {}
    for summary in summarize_forecast(records):
        result[summary.day_key] = classify(summary.average_temperature, summary.weather_label)
    return result


def anomalous_days(result: ForecastResult) -> list[str]:
    """Day keys whose outreach method could not be determined."""
    return [day for day, method in result.items() if method is OutreachMethod.UNKNOWN]
