"""
context formatting utilities for forecast series
"""

import math
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models import ForecastSeries


def _fmt(value: float, unit: str, digits: int = 0) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{value:.{digits}f}{unit}"


def format_series_to_context(series: "ForecastSeries", now: datetime) -> str:
    """
    format series as concise, human-readable text optimized for llm context

    args:
        series: ForecastSeries model instance
        now: reference instant for the trailing window

    returns:
        formatted string suitable for llm consumption
    """
    lines = [
        f"# Weather Forecast: {series.location_summary or 'unknown location'}",
        "",
    ]
    if series.analysis_instant is not None:
        lines.append(f"Analysis: {series.analysis_instant.strftime('%Y-%m-%d %H:%M UTC')}")

    latest = series.latest
    if latest is None:
        lines.append("No observations available.")
        return "\n".join(lines)

    lines.extend([
        "",
        "## Latest",
        f"{latest.instant.isoformat()}: {latest.condition or '-'}",
        f"Temperature: {_fmt(latest.temperature_celsius, '°C')}",
        f"Humidity: {_fmt(latest.relative_humidity_percent, '%')}",
        f"Wind: {_fmt(latest.wind_speed_kmh, ' km/h', 1)}",
        "",
    ])

    window = series.window(now)
    averages = series.averages(now)
    lines.extend([
        f"## Last 24 Hours ({len(window)} observations)",
        f"Avg temperature: {_fmt(averages.temperature_celsius, '°C', 1)}",
        f"Avg humidity: {_fmt(averages.relative_humidity_percent, '%', 1)}",
        f"Avg wind: {_fmt(averages.wind_speed_kmh, ' km/h', 1)}",
        "",
        "## Series",
    ])

    for obs in series.observations:
        lines.append(
            f"{obs.instant.strftime('%d/%m %H:%M')}: {_fmt(obs.temperature_celsius, '°C')}, "
            f"{_fmt(obs.relative_humidity_percent, '%')} humidity, "
            f"{_fmt(obs.wind_speed_kmh, ' km/h', 1)} wind, {obs.condition or '-'}"
        )

    return "\n".join(lines)
