"""
Weather CLI — the user-facing interface.

Asks for a city and country, fetches the current weather from
OpenWeatherMap and prints a short report. Repeats until the answer to
the continuation prompt is "no".

Usage:
  API_KEY=... python cli.py
"""

import logging
import sys
from typing import Callable, Optional, TextIO

import requests

from abilities.prompts import ASK_CONTINUE, ask, read_query, wants_to_continue
from abilities.weather import fetch_weather
from config import Config, load_config
from errors import ConfigError, WeatherError
from presenter import print_banner, print_report

log = logging.getLogger("cli")


def setup_logging(level: str = "WARNING"):
    numeric = logging.getLevelName(level)
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        level=numeric if isinstance(numeric, int) else logging.WARNING,
    )


def run(
    config: Config,
    session: requests.Session,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    fetch: Callable = fetch_weather,
) -> int:
    """Interactive loop. Returns the process exit status."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    print_banner(stdout)

    while True:
        try:
            if not wants_to_continue(ask(ASK_CONTINUE, stdin, stdout)):
                break
            query = read_query(stdin, stdout)
        except EOFError:
            log.info("Input closed, exiting")
            break

        try:
            report = fetch(query, config, session=session)
        except WeatherError as e:
            print(e, file=stderr)
            continue

        print_report(report, stdout)

    return 0


def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        setup_logging()
        log.error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)
    log.info(f"Using {config.base_url} (timeout={config.timeout}s)")

    with requests.Session() as session:
        return run(config, session)


if __name__ == "__main__":
    sys.exit(main())
