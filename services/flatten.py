"""
flattening of the nested bmkg `weather` field
"""

from typing import Any


def extract_weather(payload: Any) -> Any:
    """return `payload["data"][0]["weather"]`, or None if any step is missing"""
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if not isinstance(first, dict):
        return None
    return first.get("weather")


def as_blocks(weather: Any) -> list[list[Any]]:
    """
    narrow the raw `weather` field to a list of day blocks

    absence and structural mismatch collapse into the same empty result

    args:
        weather: raw field, expected to be a list of lists of records

    returns:
        the day blocks, or an empty list
    """
    if not isinstance(weather, list):
        return []
    if not all(isinstance(block, list) for block in weather):
        return []
    return weather


def flatten_weather(weather: Any) -> list[Any]:
    """concatenate the day blocks in order into one flat list of raw records"""
    return [record for block in as_blocks(weather) for record in block]
