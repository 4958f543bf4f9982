from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from models import Observation

WIB = timezone(timedelta(hours=7))


def make_record(local_datetime: str, **fields: Any) -> dict[str, Any]:
    record: dict[str, Any] = {"local_datetime": local_datetime}
    record.update(fields)
    return record


def make_observation(hour: int, temperature: float = 28.0, *, day: int = 1, condition: str = "") -> Observation:
    return Observation(
        instant=datetime(2024, 1, day, hour, tzinfo=WIB),
        temperature_celsius=temperature,
        relative_humidity_percent=80.0,
        wind_speed_kmh=5.0,
        condition=condition,
    )


def make_payload(weather: Any, location: Any = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"data": [{"weather": weather}]}
    if location is not None:
        payload["location"] = location
    return payload
