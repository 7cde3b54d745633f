from .config import WeatherConfig, WeatherEnv
from .controller import WeatherController
from .exceptions import (
    LocationSubscriptionError,
    PermissionDeniedError,
    WeatherAppError,
    WeatherFetchError,
    WeatherParseError,
)
from .lifecycle import Lifecycle, LifecycleObserver
from .location import Position
from .weather import WeatherSummary

__all__ = [
    "Lifecycle",
    "LifecycleObserver",
    "LocationSubscriptionError",
    "PermissionDeniedError",
    "Position",
    "WeatherAppError",
    "WeatherConfig",
    "WeatherController",
    "WeatherEnv",
    "WeatherFetchError",
    "WeatherParseError",
    "WeatherSummary",
]
