"""
Presenter — turns a WeatherReport into terminal output.

Provides:
  - Emoji lookup for OpenWeatherMap condition descriptions
  - The multi-line report template and the startup banner
  - Bold/white styling through click, which strips it when the output
    stream is not a terminal; NO_COLOR turns it off everywhere
"""

import os
from typing import Optional, TextIO

import click

from models import WeatherReport

# Exact, case-sensitive match on weather[0].description.
EMOJI_TABLE = {
    "clear sky": "☀️",  # sun
    "few clouds": "\U0001f324️",  # sun behind small cloud
    "scattered clouds": "\U0001f324️",
    "broken clouds": "\U0001f324️",
    "overcast clouds": "☁️",  # cloud
    "mist": "☁️",
    "haze": "☁️",
    "smoke": "☁️",
    "sand": "☁️",
    "shower rain": "\U0001f327️",  # cloud with rain
    "rain": "\U0001f327️",
    "thunderstorm": "⛈️",  # cloud with lightning and rain
    "snow": "\U0001f328️",  # cloud with snow
}
FALLBACK_EMOJI = "⚠️error"  # warning sign

BANNER = r"""
___________________________________________________
.   *   .   .  .       .   *   .     .    .   *   .
.   .  .   .  * ┓ ┏     ┓       ┏┓┓ ┳    .  .
.    .    *  .  ┃┃┃┏┓┏┓╋┣┓┏┓┏┓  ┃ ┃ ┃  *  .    .  *
*  .    .    *  ┗┻┛┗ ┗┻┗┛┗┗ ┛   ┗┛┗┛┻  .  .  *    .
. *      .   .    .  .     .  * .  . .  *  .    . *
___________________________________________________
"""

RULE = "_" * 51

TEMP_UNIT = "°C"
WIND_UNIT = "m/s"


def lookup_emoji(description: str) -> str:
    return EMOJI_TABLE.get(description, FALLBACK_EMOJI)


def _num(value) -> str:
    # As delivered: 32.5 -> "32.5", 30.0 -> "30", 12.345678 -> "12.345678"
    return str(int(value)) if float(value).is_integer() else repr(value)


def render_report(report: WeatherReport) -> str:
    """Format the report block for a decoded response."""
    s = report.summary()
    return "\n".join([
        f"Weather in {s.city},{s.country} | {s.status} ({lookup_emoji(s.description)})",
        f"    > Temperature: {_num(s.temp)}{TEMP_UNIT}",
        f"        > Temperature-Min: {_num(s.temp_min)}{TEMP_UNIT}",
        f"        > Temperature-Max: {_num(s.temp_max)}{TEMP_UNIT}",
        f"    > Wind: {_num(s.wind_speed)} {WIND_UNIT}",
        f"    > Humidity: {s.humidity} %",
        RULE,
    ])


def render_banner() -> str:
    return BANNER


# ── Styling ─────────────────────────────────────────────────────

def _color() -> Optional[bool]:
    # None lets click decide from the stream (styles stripped when not a tty).
    if os.environ.get("NO_COLOR"):
        return False
    return None


def style(text: str) -> str:
    return click.style(text, fg="white", bold=True)


def print_text(text: str, stream: Optional[TextIO] = None):
    click.echo(style(text), file=stream, color=_color())


def print_banner(stream: Optional[TextIO] = None):
    print_text(render_banner(), stream)


def print_report(report: WeatherReport, stream: Optional[TextIO] = None):
    print_text(render_report(report), stream)
