"""
Prompt ability — read the continuation answer, city and country from the
terminal and normalise them into a WeatherQuery.
"""

import sys
from typing import Optional, TextIO

from models import WeatherQuery
from presenter import print_text

ASK_CONTINUE = "Check weather in your city? <yes|no>"
ASK_CITY = "Enter your city name | e.g. <Yangon, Bangkok>"
ASK_COUNTRY = "Enter your country code | e.g. <MM, TH>"

STOP_ANSWER = "no"


def ask(prompt: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """Print a prompt and read one line. Raises EOFError when input is exhausted."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print_text(prompt, stdout)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line


def wants_to_continue(answer: str) -> bool:
    # Anything that isn't exactly "no" counts as yes.
    return answer.strip().lower() != STOP_ANSWER


def normalize_city(raw: str) -> str:
    """Collapse whitespace and join multi-word names with '+' ("New York" -> "New+York")."""
    return "+".join(raw.split())


def normalize_country(raw: str) -> str:
    return raw.strip().lower()


def build_query(city_raw: str, country_raw: str) -> WeatherQuery:
    return WeatherQuery(city=normalize_city(city_raw), country=normalize_country(country_raw))


def read_query(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> WeatherQuery:
    """Ask for city then country."""
    city = ask(ASK_CITY, stdin, stdout)
    country = ask(ASK_COUNTRY, stdin, stdout)
    return build_query(city, country)
