"""
Weather ability — current conditions from OpenWeatherMap.

One GET per call, no retries. The body is decoded whatever the HTTP status,
so API error envelopes ({"cod": "404", "message": "city not found"}) fail
as DecodeError rather than being parsed as a report.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from config import Config
from errors import DecodeError, NetworkError, NoConditionDataError
from models import WeatherQuery, WeatherReport

log = logging.getLogger(__name__)


def build_url(query: WeatherQuery, config: Config) -> str:
    # Values go in verbatim; city is already '+'-joined by the prompt ability.
    return (
        f"{config.base_url}?q={query.city},{query.country}"
        f"&APPID={config.api_key}&units={config.units}"
    )


def _redact(text: str, api_key: str) -> str:
    return text.replace(api_key, "***") if api_key else text


def describe_validation_error(e: ValidationError) -> str:
    """Flatten pydantic errors into one line: "main.temp: Field required; ..."."""
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "response"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def fetch_weather(
    query: WeatherQuery,
    config: Config,
    session: Optional[requests.Session] = None,
) -> WeatherReport:
    """Fetch and decode the current weather for a query. Raises NetworkError or DecodeError."""
    url = build_url(query, config)
    http = session or requests
    log.debug(f"GET {_redact(url, config.api_key)} (timeout={config.timeout}s)")

    try:
        resp = http.get(url, timeout=config.timeout)
    except requests.RequestException as e:
        reason = _redact(str(e), config.api_key)
        log.info(f"Request for {query.city},{query.country} failed: {reason}")
        raise NetworkError(str(e)) from e

    log.debug(f"HTTP {resp.status_code} for {query.city},{query.country}")

    try:
        data = resp.json()
    except ValueError as e:
        log.info(f"Non-JSON response (HTTP {resp.status_code}): {e}")
        raise DecodeError(f"error decoding response body: {e}") from e

    try:
        report = WeatherReport.model_validate(data)
    except ValidationError as e:
        message = describe_validation_error(e)
        log.info(f"Unexpected response shape (HTTP {resp.status_code}): {message}")
        raise DecodeError(message) from e
    except NoConditionDataError as e:
        log.info(f"HTTP {resp.status_code}: {e}")
        raise

    log.debug(f"Decoded report: {report.model_dump()}")
    return report
