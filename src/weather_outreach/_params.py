"""Query parameter builder for the forecast endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Location:
    """A single city the forecast is requested for.

    Usage:
        Location("Minneapolis", "us")  # produces: q=Minneapolis,us
        Location("London")             # produces: q=London
    """

    city: str
    country_code: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        """Convert this location to the ``q`` query parameter."""
        if self.country_code:
            return [("q", f"{self.city},{self.country_code}")]
        return [("q", self.city)]

    def __str__(self) -> str:
        return self.to_params()[0][1]


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Plain values become ``key=value`` pairs. Location instances expand to ``q``.

    Args:
        **kwargs: Keyword arguments where keys are parameter names and values are
                  either plain values or Location instances.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, Location):
            params.extend(value.to_params())
        else:
            params.append((key, str(value)))
    return params
