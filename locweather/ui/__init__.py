from .console import ConsoleDisplay, ConsoleNotifier
from .context import UiContext
from .ports import Display, Notifier
from .presenter import (
    FETCH_ERROR_NOTICE,
    FETCH_ERROR_TEXT,
    LOCATION_ERROR_NOTICE,
    LOCATION_ERROR_TEXT,
    PARSE_ERROR_NOTICE,
    PARSE_ERROR_TEXT,
    PERMISSION_DENIED_NOTICE,
    PERMISSION_REQUIRED_TEXT,
    WeatherPresenter,
)

__all__ = [
    "ConsoleDisplay",
    "ConsoleNotifier",
    "Display",
    "FETCH_ERROR_NOTICE",
    "FETCH_ERROR_TEXT",
    "LOCATION_ERROR_NOTICE",
    "LOCATION_ERROR_TEXT",
    "Notifier",
    "PARSE_ERROR_NOTICE",
    "PARSE_ERROR_TEXT",
    "PERMISSION_DENIED_NOTICE",
    "PERMISSION_REQUIRED_TEXT",
    "UiContext",
    "WeatherPresenter",
]
