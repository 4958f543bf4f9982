"""
forecast service - builds the normalized observation series from a raw payload
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from config import WINDOW_HOURS
from models import ForecastSeries, Location, Observation, WindowAverages
from services.flatten import extract_weather, flatten_weather
from services.helpers import to_display_string, to_number
from services.timestamps import normalize_analysis, normalize_local

logger = logging.getLogger(__name__)

# bmkg record keys
LOCAL_TIME_KEY = "local_datetime"
ANALYSIS_TIME_KEY = "analysis_date"
TEMPERATURE_KEY = "t"
HUMIDITY_KEY = "hu"
WIND_SPEED_KEY = "ws"
CONDITION_KEY = "weather_desc"
ICON_KEY = "image"


class ForecastService:
    """service for turning bmkg forecast payloads into observation series"""

    @staticmethod
    def parse_location(payload: Any) -> Optional[Location]:
        """return the payload location, or None when absent or not an object"""
        if not isinstance(payload, dict):
            return None
        raw = payload.get("location")
        if not isinstance(raw, dict):
            return None
        return Location.model_validate(raw)

    @staticmethod
    def build_observation(record: Mapping[str, Any]) -> Observation:
        """
        build one observation from a raw weather record

        args:
            record: raw record from the flattened series

        returns:
            observation with nan in place of any unparsable reading

        raises:
            ValueError: if the local time cannot be normalized
        """
        icon = record.get(ICON_KEY)
        return Observation(
            instant=normalize_local(record.get(LOCAL_TIME_KEY)),
            temperature_celsius=to_number(record.get(TEMPERATURE_KEY)),
            relative_humidity_percent=to_number(record.get(HUMIDITY_KEY)),
            wind_speed_kmh=to_number(record.get(WIND_SPEED_KEY)),
            condition=to_display_string(record.get(CONDITION_KEY)),
            icon_uri=to_display_string(icon) or None,
        )

    @staticmethod
    def build_observations(records: Iterable[Any]) -> list[Observation]:
        """
        build observations in flatten order

        bad readings never drop a record; only records without a usable
        local time are skipped, since they cannot be placed on the timeline
        """
        observations = []
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                logger.warning("skipping record %d: not an object (%r)", index, record)
                continue
            try:
                observations.append(ForecastService.build_observation(record))
            except (TypeError, ValueError) as e:
                logger.warning(
                    "skipping record %d: bad %s %r: %s",
                    index, LOCAL_TIME_KEY, record.get(LOCAL_TIME_KEY), e,
                )
        return observations

    @staticmethod
    def find_analysis_instant(records: Iterable[Any]) -> Optional[datetime]:
        """
        return the first analysis time found in flatten order

        later analysis times are ignored even if they differ
        """
        for record in records:
            if not isinstance(record, Mapping):
                continue
            raw = record.get(ANALYSIS_TIME_KEY)
            if raw is None or raw == "":
                continue
            try:
                return normalize_analysis(to_display_string(raw))
            except ValueError as e:
                logger.warning("unparsable %s %r: %s", ANALYSIS_TIME_KEY, raw, e)
                return None
        return None

    @staticmethod
    def sort_series(observations: Iterable[Observation]) -> list[Observation]:
        """order observations by instant; ties keep their input order"""
        return sorted(observations, key=lambda o: o.instant)

    @staticmethod
    def select_window(
        observations: Iterable[Observation],
        now: datetime,
        hours: Optional[float] = None,
    ) -> list[Observation]:
        """
        select observations at or after `now - hours`

        args:
            observations: series in chronological order
            now: timezone-aware reference instant
            hours: window length, defaults to WINDOW_HOURS

        returns:
            the windowed observations, order preserved

        raises:
            ValueError: if now is naive
        """
        if now.tzinfo is None or now.utcoffset() is None:
            raise ValueError(f"now must be timezone-aware: {now}")
        cutoff = now - timedelta(hours=WINDOW_HOURS if hours is None else hours)
        return [o for o in observations if o.instant >= cutoff]

    @staticmethod
    def average(values: Iterable[float]) -> float:
        """arithmetic mean of the available values, nan when there are none"""
        available = [v for v in values if not math.isnan(v)]
        if not available:
            return math.nan
        return math.fsum(available) / len(available)

    @staticmethod
    def summarize_window(observations: Sequence[Observation]) -> WindowAverages:
        """average temperature, humidity and wind speed independently"""
        return WindowAverages(
            temperature_celsius=ForecastService.average(o.temperature_celsius for o in observations),
            relative_humidity_percent=ForecastService.average(
                o.relative_humidity_percent for o in observations
            ),
            wind_speed_kmh=ForecastService.average(o.wind_speed_kmh for o in observations),
        )

    @staticmethod
    def parse_forecast_data(payload: Any) -> ForecastSeries:
        """
        parse a raw api payload into a structured forecast series

        args:
            payload: decoded json document, possibly None or malformed

        returns:
            series with location, analysis instant and sorted observations;
            missing pieces degrade to None or an empty series
        """
        records = flatten_weather(extract_weather(payload))
        observations = ForecastService.sort_series(ForecastService.build_observations(records))
        series = ForecastSeries(
            location=ForecastService.parse_location(payload),
            analysis_instant=ForecastService.find_analysis_instant(records),
            observations=tuple(observations),
        )
        logger.debug(
            "parsed %d of %d records for %r",
            len(observations), len(records), series.location_summary,
        )
        return series

    @staticmethod
    def load_forecast(
        adm4: Optional[str] = None,
        *,
        fetch: Optional[Callable[..., Any]] = None,
    ) -> ForecastSeries:
        """
        fetch the forecast for an adm4 code once and parse it

        raises:
            ForecastLoadError: if the fetch fails
        """
        if fetch is None:
            from api.weather import fetch_forecast as fetch
        return ForecastService.parse_forecast_data(fetch(adm4))
