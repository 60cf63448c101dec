import copy

import pytest

from config import Config

BANGKOK = {
    "coord": {"lon": 100.5167, "lat": 13.75},
    "weather": [
        {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
    ],
    "base": "stations",
    "main": {
        "temp": 32.5,
        "feels_like": 38.1,
        "temp_min": 30.0,
        "temp_max": 34.0,
        "pressure": 1008,
        "humidity": 70,
        "sea_level": 1008,
        "grnd_level": 1007,
    },
    "visibility": 10000,
    "wind": {"speed": 3.2, "deg": 190},
    "clouds": {"all": 0},
    "dt": 1718870400,
    "sys": {
        "type": 2,
        "id": 2002339,
        "country": "TH",
        "sunrise": 1718837551,
        "sunset": 1718883979,
    },
    "timezone": 25200,
    "id": 1609350,
    "name": "Bangkok",
    "cod": 200,
}


@pytest.fixture
def payload():
    """A fresh copy of a well-formed Bangkok response."""
    return copy.deepcopy(BANGKOK)


@pytest.fixture
def config():
    return Config(api_key="test-key", timeout=2.5)
