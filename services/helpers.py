"""
coercion helpers for loosely typed api fields
"""

import math
from typing import Any


def to_number(raw: Any) -> float:
    """
    convert a number or numeric string to float

    args:
        raw: value as delivered by the api

    returns:
        finite float, or nan when the value is absent or not numeric
    """
    # bool is an int subclass but never a reading
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return math.nan
        try:
            value = float(text)
        except ValueError:
            return math.nan
    else:
        return math.nan
    return value if math.isfinite(value) else math.nan


def to_display_string(raw: Any) -> str:
    """convert absent values to an empty string, stringify everything else"""
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return str(raw)
