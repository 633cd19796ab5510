"""Basic usage examples for the weather outreach client."""

import os

from weather_outreach import Location, OpenWeatherClient, aggregate_forecast, anomalous_days
from weather_outreach.aggregator import summarize_forecast


def main() -> None:
    location = Location("Minneapolis", "us")
    with OpenWeatherClient(api_key=os.environ["OPENWEATHER_API_KEY"]) as client:
        records = client.forecast(location)

    print(f"=== {len(records)} readings for {location} ===")
    for r in records[:8]:
        print(f"  {r.timestamp:%Y-%m-%d %H:%M}  {r.temperature:>6}°F  {r.condition_label}")

    # Per-day statistics behind each recommendation
    print("\n=== Daily summaries ===")
    for summary in summarize_forecast(records):
        print(
            f"  {summary.day_key}: avg {summary.average_temperature}°F over "
            f"{summary.sample_count} readings, {summary.weather_label.value}"
        )

    print("\n=== Outreach plan ===")
    plan = aggregate_forecast(records)
    for day, method in plan.items():
        print(f"  {day}, {method.value}")

    unknown = anomalous_days(plan)
    if unknown:
        print(f"\n  No rule matched for: {', '.join(unknown)}")


if __name__ == "__main__":
    main()
