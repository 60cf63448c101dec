"""
Unit tests for configuration loading.
"""

import unittest.mock as mock

import pytest

from config import REQUEST_TIMEOUT, WEATHER_URL, load_config
from errors import ConfigError


class TestLoadConfig:
    def test_defaults(self):
        config = load_config({"API_KEY": "abc123"})
        assert config.api_key == "abc123"
        assert config.base_url == WEATHER_URL
        assert config.units == "metric"
        assert config.timeout == REQUEST_TIMEOUT
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("env", [{}, {"API_KEY": ""}, {"API_KEY": "   "}])
    def test_missing_key(self, env):
        with pytest.raises(ConfigError, match="API_KEY"):
            load_config(env)

    def test_overrides(self):
        config = load_config({
            "API_KEY": "abc123",
            "WEATHER_URL": "http://localhost:8000/weather",
            "WEATHER_TIMEOUT": "3.5",
            "LOG_LEVEL": "debug",
        })
        assert config.base_url == "http://localhost:8000/weather"
        assert config.timeout == 3.5
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("timeout", ["soon", "0", "-2", "nan", "NaN", "inf", "-inf", "Infinity"])
    def test_bad_timeout(self, timeout):
        with pytest.raises(ConfigError, match="WEATHER_TIMEOUT"):
            load_config({"API_KEY": "abc123", "WEATHER_TIMEOUT": timeout})

    @pytest.mark.parametrize("level", ["BASIC_FORMAT", "verbose", "root"])
    def test_bad_log_level(self, level):
        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            load_config({"API_KEY": "abc123", "LOG_LEVEL": level})

    @pytest.mark.parametrize("level", ["debug", " info ", "WARNING", "error"])
    def test_log_level_names(self, level):
        assert load_config({"API_KEY": "abc123", "LOG_LEVEL": level}).log_level == level.strip().upper()

    def test_config_is_frozen(self):
        config = load_config({"API_KEY": "abc123"})
        with pytest.raises(AttributeError):
            config.api_key = "other"

    @mock.patch("config.load_dotenv")
    def test_reads_process_environment(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("API_KEY", "from-env")
        assert load_config().api_key == "from-env"
        mock_load_dotenv.assert_called_once()
