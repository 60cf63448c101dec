"""
Error types for the weather client.

ConfigError aborts startup. Everything else is raised per request and
caught by the main loop, which reports it and keeps going.
"""


class WeatherError(Exception):
    """Base class for all weather client errors."""


class ConfigError(WeatherError):
    """Required configuration is missing or malformed."""


class NetworkError(WeatherError):
    """The HTTP request could not be completed (connection, timeout, ...)."""


class DecodeError(WeatherError):
    """The response body does not match the WeatherReport schema."""


class NoConditionDataError(DecodeError):
    """The response decoded but carries no condition entries."""
