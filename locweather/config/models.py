from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from locweather.config.env import WeatherEnv

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"


class WeatherConfig(BaseModel):
    """Immutable runtime settings, built once at startup and handed to each component."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    weather_url: str = OPENWEATHER_CURRENT_URL

    min_update_interval_ms: int = Field(default=60_000, ge=0)
    min_distance_m: float = Field(default=100.0, ge=0.0)
    permission_request_code: int = 123

    connect_timeout_seconds: float = Field(default=30.0, gt=0.0)
    read_timeout_seconds: float = Field(default=30.0, gt=0.0)
    shutdown_grace_seconds: float = Field(default=1.0, ge=0.0)

    @classmethod
    def from_env(cls, env: WeatherEnv | None = None) -> WeatherConfig:
        env = env or WeatherEnv()
        return cls(api_key=env.openweather_api_key)
