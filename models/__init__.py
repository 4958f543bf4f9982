"""
pydantic models for the normalized bmkg forecast series
"""

import math
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Location(BaseModel):
    """administrative location of the forecast point"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    province: str = Field(
        default="",
        validation_alias=AliasChoices("provinsi", "province"),
        description="province name",
    )
    regency: str = Field(
        default="",
        validation_alias=AliasChoices("kotkab", "regency"),
        description="regency or city name",
    )
    district: str = Field(
        default="",
        validation_alias=AliasChoices("kecamatan", "district"),
        description="district name",
    )
    village: str = Field(
        default="",
        validation_alias=AliasChoices("desa", "village"),
        description="village name",
    )

    @field_validator("province", "regency", "district", "village", mode="before")
    @classmethod
    def coerce_text(cls, v) -> str:
        """tolerate null or non-string names from the api"""
        from services.helpers import to_display_string
        return to_display_string(v)

    @property
    def summary(self) -> str:
        """village, district, regency, province with empty parts skipped"""
        parts = [self.village, self.district, self.regency, self.province]
        return ", ".join(p for p in parts if p)


class Observation(BaseModel):
    """one normalized weather data point"""
    model_config = ConfigDict(frozen=True)

    instant: datetime = Field(description="observation time with explicit utc offset")
    # no range constraints: nan marks an unavailable reading
    temperature_celsius: float = Field(description="air temperature in celsius, nan if unavailable")
    relative_humidity_percent: float = Field(description="relative humidity in percent, nan if unavailable")
    wind_speed_kmh: float = Field(description="wind speed in km/h, nan if unavailable")
    condition: str = Field(default="", description="free-text weather description")
    icon_uri: Optional[str] = Field(default=None, description="weather icon reference")

    @field_validator("instant")
    @classmethod
    def validate_instant(cls, v: datetime) -> datetime:
        """validate instant carries an explicit utc offset"""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError(f"instant must be timezone-aware: {v}")
        return v


class WindowAverages(BaseModel):
    """means over a window of observations, nan when no data"""
    model_config = ConfigDict(frozen=True)

    temperature_celsius: float = math.nan
    relative_humidity_percent: float = math.nan
    wind_speed_kmh: float = math.nan


class ForecastSeries(BaseModel):
    """complete normalized forecast for one location"""
    model_config = ConfigDict(frozen=True)

    location: Optional[Location] = Field(default=None, description="forecast location")
    analysis_instant: Optional[datetime] = Field(
        default=None,
        description="utc time the upstream forecast was computed",
    )
    observations: tuple[Observation, ...] = Field(
        default=(),
        description="observations in chronological order",
    )

    @field_validator("observations")
    @classmethod
    def validate_chronological(cls, v: tuple[Observation, ...]) -> tuple[Observation, ...]:
        """validate observations are in non-decreasing order"""
        for prev, cur in zip(v, v[1:]):
            if cur.instant < prev.instant:
                raise ValueError("observations must be in chronological order")
        return v

    @property
    def latest(self) -> Optional[Observation]:
        return self.observations[-1] if self.observations else None

    @property
    def location_summary(self) -> str:
        return self.location.summary if self.location is not None else ""

    def window(self, now: datetime, hours: Optional[float] = None) -> list[Observation]:
        """observations within the trailing window ending at now"""
        from services.forecast import ForecastService
        return ForecastService.select_window(self.observations, now, hours=hours)

    def averages(self, now: datetime, hours: Optional[float] = None) -> WindowAverages:
        """averages over the trailing window ending at now"""
        from services.forecast import ForecastService
        return ForecastService.summarize_window(self.window(now, hours=hours))

    def to_context(self, now: datetime) -> str:
        """
        format the series as concise, human-readable text
        returns:
            formatted string suitable for terminal or llm consumption
        """
        from backend.context import format_series_to_context
        return format_series_to_context(self, now)


__all__ = [
    "Location",
    "Observation",
    "WindowAverages",
    "ForecastSeries",
]
