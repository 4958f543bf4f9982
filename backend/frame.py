"""
tabular projection of observations for charts and tables
"""

from typing import Iterable

import pandas as pd

from models import Observation

FRAME_COLUMNS = ["time", "temperature_c", "humidity_pct", "wind_speed_kmh", "condition", "icon_uri"]


def observations_to_frame(observations: Iterable[Observation]) -> pd.DataFrame:
    """
    build a DataFrame with one row per observation, order preserved

    args:
        observations: observations, usually a sorted series or window

    returns:
        DataFrame with FRAME_COLUMNS; empty input gives an empty frame
    """
    rows = [
        {
            "time": o.instant,
            "temperature_c": o.temperature_celsius,
            "humidity_pct": o.relative_humidity_percent,
            "wind_speed_kmh": o.wind_speed_kmh,
            "condition": o.condition,
            "icon_uri": o.icon_uri,
        }
        for o in observations
    ]
    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["time"] = pd.to_datetime(df["time"])
    return df
