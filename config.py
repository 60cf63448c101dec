"""
Configuration — loads from .env, provides defaults.

Built once at startup by load_config() and passed to whatever needs it.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from errors import ConfigError

API_KEY_VAR = "API_KEY"

# OpenWeatherMap
WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
UNITS = "metric"
REQUEST_TIMEOUT = 10.0  # seconds

# Logging
LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Config:
    api_key: str
    base_url: str = WEATHER_URL
    units: str = UNITS
    timeout: float = REQUEST_TIMEOUT
    log_level: str = LOG_LEVEL


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build the Config from the environment.

    Reads .env into os.environ first unless an explicit mapping is given.
    Raises ConfigError if API_KEY is unset, WEATHER_TIMEOUT is not a
    positive finite number, or LOG_LEVEL is not a level name.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get(API_KEY_VAR, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_VAR} not found in environment or .env file")

    raw_timeout = environ.get("WEATHER_TIMEOUT", str(REQUEST_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigError(f"WEATHER_TIMEOUT must be a number, got {raw_timeout!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(f"WEATHER_TIMEOUT must be a positive finite number, got {raw_timeout!r}")

    log_level = environ.get("LOG_LEVEL", LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

    return Config(
        api_key=api_key,
        base_url=environ.get("WEATHER_URL", WEATHER_URL).rstrip("?"),
        timeout=timeout,
        log_level=log_level,
    )
