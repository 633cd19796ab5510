"""
weather-outreach — CLI entry point.

Loads configuration, fetches the forecast, and prints one
``YYYY-MM-DD, <outreach method>`` line per day::

    pip install -e .
    export OPENWEATHER_API_KEY=...
    weather-outreach forecast
    weather-outreach forecast --city Duluth --country us
"""

from __future__ import annotations

from typing import Optional

import typer

from weather_outreach.aggregator import anomalous_days
from weather_outreach.client import OpenWeatherClient
from weather_outreach.config import load_config
from weather_outreach.exceptions import WeatherOutreachError
from weather_outreach.formatters import format_forecast
from weather_outreach.service import OutreachPlanner

app = typer.Typer(
    name="weather-outreach",
    help="Recommend a daily customer outreach channel from the weather forecast.",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Weather-driven outreach planning."""


@app.command()
def forecast(
    city: Optional[str] = typer.Option(None, "--city", help="City name (default: Minneapolis)."),
    country: Optional[str] = typer.Option(None, "--country", help="ISO country code (default: us)."),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="OpenWeatherMap API key."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds."),
    env_file: Optional[str] = typer.Option(None, "--env-file", help="Path to a .env file."),
) -> None:
    """Print the recommended outreach method for each forecast day."""
    try:
        config = load_config(
            dotenv_path=env_file,
            city=city,
            country_code=country,
            api_key=api_key,
            timeout=timeout,
        )
        with OpenWeatherClient(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            units=config.units,
        ) as client:
            result = OutreachPlanner(client).plan(config.location)
    except WeatherOutreachError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    for line in format_forecast(result):
        typer.echo(line)
    for day in anomalous_days(result):
        typer.echo(f"[WARN] {day}: no outreach rule matched", err=True)
