from .env import WeatherEnv
from .models import OPENWEATHER_CURRENT_URL, WeatherConfig

__all__ = [
    "OPENWEATHER_CURRENT_URL",
    "WeatherConfig",
    "WeatherEnv",
]
