"""Formatting helpers for outreach plans."""

from __future__ import annotations

from weather_outreach.models.outreach import ForecastResult, OutreachMethod


def format_entry(day: str, method: OutreachMethod) -> str:
    """Format one day as ``YYYY-MM-DD, <method>``."""
    return f"{day}, {method.value}"


def format_forecast(result: ForecastResult) -> list[str]:
    """One line per day, in the result's chronological order."""
    return [format_entry(day, method) for day, method in result.items()]
