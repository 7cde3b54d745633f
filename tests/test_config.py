import pytest
from pydantic import ValidationError

from locweather.config import OPENWEATHER_CURRENT_URL, WeatherConfig, WeatherEnv


def test_defaults():
    config = WeatherConfig(api_key="key")

    assert config.weather_url == OPENWEATHER_CURRENT_URL
    assert config.min_update_interval_ms == 60_000
    assert config.min_distance_m == 100.0
    assert config.permission_request_code == 123
    assert config.connect_timeout_seconds == 30.0
    assert config.read_timeout_seconds == 30.0


def test_config_is_immutable():
    config = WeatherConfig(api_key="key")

    with pytest.raises(ValidationError):
        config.min_distance_m = 5.0


def test_from_env(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
    monkeypatch.setenv("LOCWEATHER_LOG_LEVEL", "debug")

    env = WeatherEnv()
    config = WeatherConfig.from_env(env)

    assert config.api_key.get_secret_value() == "from-env"
    assert env.locweather_log_level == "debug"


def test_missing_api_key(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)

    with pytest.raises(ValidationError):
        WeatherEnv()
