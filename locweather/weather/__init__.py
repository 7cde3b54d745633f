from .client import WeatherClient
from .fetcher import WeatherFetcher, WeatherSource
from .formatting import (
    format_weather_summary,
    kelvin_to_celsius,
    parse_weather_payload,
    transform_api_response,
)
from .views import MainReadings, OpenWeatherResponse, WeatherCondition, WeatherSummary

__all__ = [
    "MainReadings",
    "OpenWeatherResponse",
    "WeatherClient",
    "WeatherCondition",
    "WeatherFetcher",
    "WeatherSource",
    "WeatherSummary",
    "format_weather_summary",
    "kelvin_to_celsius",
    "parse_weather_payload",
    "transform_api_response",
]
