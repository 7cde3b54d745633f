from __future__ import annotations

from locweather.exceptions import (
    LocationSubscriptionError,
    PermissionDeniedError,
    WeatherFetchError,
    WeatherParseError,
)
from locweather.shared import LoggingMixin
from locweather.ui.ports import Display, Notifier
from locweather.weather.formatting import format_weather_summary, parse_weather_payload

PERMISSION_REQUIRED_TEXT = "Location permission required for weather updates"
PERMISSION_DENIED_NOTICE = "Location permission denied"

LOCATION_ERROR_TEXT = "Error getting location updates"
LOCATION_ERROR_NOTICE = "Error getting location updates"

FETCH_ERROR_TEXT = "Error fetching weather data"
FETCH_ERROR_NOTICE = "Network error"

PARSE_ERROR_TEXT = "Error parsing weather data"
PARSE_ERROR_NOTICE = "Error processing weather data"


class WeatherPresenter(LoggingMixin):
    """Writes weather summaries and error messages to the screen. UI context only."""

    def __init__(self, display: Display, notifier: Notifier):
        self._display = display
        self._notifier = notifier

    def render_payload(self, payload: str) -> None:
        try:
            summary = parse_weather_payload(payload)
        except WeatherParseError as e:
            self.logger.error("Error parsing weather data", exc_info=e)
            self._show_error(PARSE_ERROR_TEXT, PARSE_ERROR_NOTICE)
            return

        self.logger.info(
            "Weather for %s: %s, %.1f°C",
            summary.city_name,
            summary.description,
            summary.temperature_celsius,
        )
        self._display.set_text(format_weather_summary(summary))

    def show_fetch_error(self, error: WeatherFetchError | None = None) -> None:
        self.logger.debug("Showing fetch error: %s", error)
        self._show_error(FETCH_ERROR_TEXT, FETCH_ERROR_NOTICE)

    def show_permission_denied(self, error: PermissionDeniedError | None = None) -> None:
        self.logger.debug("Showing permission denial: %s", error)
        self._show_error(PERMISSION_REQUIRED_TEXT, PERMISSION_DENIED_NOTICE)

    def show_location_error(self, error: LocationSubscriptionError | None = None) -> None:
        self.logger.debug("Showing location error: %s", error)
        self._show_error(LOCATION_ERROR_TEXT, LOCATION_ERROR_NOTICE)

    def _show_error(self, text: str, notice: str) -> None:
        self._display.set_text(text)
        self._notifier.notify(notice)
