"""
Data models for queries and OpenWeatherMap current-weather responses.

WeatherReport.model_validate() decodes strictly: integer fields reject
floats, booleans and strings, and an empty condition list raises
NoConditionDataError. Callers turn pydantic's ValidationError into
DecodeError.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, StrictInt, field_validator

from errors import NoConditionDataError


# ── Query ───────────────────────────────────────────────────────

@dataclass
class WeatherQuery:
    city: str
    country: str


# ── Report ──────────────────────────────────────────────────────

class Coord(BaseModel):
    lon: float
    lat: float


class Condition(BaseModel):
    id: StrictInt
    main: str  # short category: "Rain", "Clear", ...
    description: str  # "clear sky", "light rain", ...
    icon: str


class MainReadings(BaseModel):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: StrictInt
    humidity: StrictInt
    sea_level: StrictInt
    grnd_level: StrictInt


class Wind(BaseModel):
    speed: float
    deg: StrictInt


class Clouds(BaseModel):
    all: StrictInt


class SysInfo(BaseModel):
    type: Optional[StrictInt] = None
    id: Optional[StrictInt] = None
    country: str
    sunrise: StrictInt
    sunset: StrictInt


@dataclass
class WeatherSummary:
    """The handful of fields the report template shows."""
    city: str
    country: str
    status: str
    description: str
    wind_speed: float
    temp: float
    temp_min: float
    temp_max: float
    humidity: int


class WeatherReport(BaseModel):
    coord: Coord
    weather: list[Condition]
    base: Optional[str] = None
    main: MainReadings
    visibility: Optional[StrictInt] = None
    wind: Wind
    clouds: Clouds
    dt: StrictInt  # unix timestamp
    sys: SysInfo
    timezone: StrictInt  # UTC offset, seconds
    name: str
    cod: StrictInt

    @field_validator("weather")
    @classmethod
    def check_has_conditions(cls, v: list[Condition]) -> list[Condition]:
        # Not a ValueError, so pydantic lets it through unwrapped.
        if not v:
            raise NoConditionDataError("response contains no weather conditions")
        return v

    @property
    def primary_condition(self) -> Condition:
        if not self.weather:
            raise NoConditionDataError(f"no weather conditions for {self.name!r}")
        return self.weather[0]

    def summary(self) -> WeatherSummary:
        condition = self.primary_condition
        return WeatherSummary(
            city=self.name,
            country=self.sys.country,
            status=condition.main,
            description=condition.description,
            wind_speed=self.wind.speed,
            temp=self.main.temp,
            temp_min=self.main.temp_min,
            temp_max=self.main.temp_max,
            humidity=self.main.humidity,
        )
