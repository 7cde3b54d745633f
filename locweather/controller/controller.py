"""
Location-to-weather controller for the single weather screen
"""

from __future__ import annotations

from locweather.config import WeatherConfig
from locweather.exceptions import PermissionDeniedError
from locweather.location import LocationProvider, LocationSource, Position
from locweather.permission import PermissionGate, PermissionProvider
from locweather.shared import LivenessToken, LoggingMixin
from locweather.ui import Display, Notifier, UiContext, WeatherPresenter
from locweather.weather import WeatherClient, WeatherFetcher, WeatherSource


class WeatherController(LoggingMixin):
    """Permission gate -> location updates -> weather fetch -> display.

    Acts as both the lifecycle observer and the location listener. Must be
    created on the loop that serves as the UI context.
    """

    def __init__(
        self,
        config: WeatherConfig,
        permissions: PermissionProvider,
        location_provider: LocationProvider,
        display: Display,
        notifier: Notifier,
        weather_client: WeatherSource | None = None,
        ui_context: UiContext | None = None,
    ):
        self._config = config
        self._permissions = permissions
        self._liveness = LivenessToken()
        self._ui = ui_context or UiContext()

        self.presenter = WeatherPresenter(display, notifier)
        self.permission_gate = PermissionGate(
            permissions,
            config.permission_request_code,
            on_granted=self.start_location_updates,
            on_denied=self._on_permission_denied,
        )
        self.location_source = LocationSource(
            location_provider,
            permissions,
            config,
            listener=self,
            on_error=self.presenter.show_location_error,
        )
        self.fetcher = WeatherFetcher(
            weather_client or WeatherClient(config),
            self._ui,
            self._liveness,
            on_payload=self.presenter.render_payload,
            on_error=self.presenter.show_fetch_error,
        )

        self.logger.info("Weather controller initialized")

    @property
    def is_alive(self) -> bool:
        return self._liveness.is_alive

    # Lifecycle --------------------------------------------------------------
    def on_create(self) -> None:
        self.permission_gate.evaluate()

    def on_resume(self) -> None:
        self.start_location_updates()

    def on_pause(self) -> None:
        self.stop_location_updates()

    async def on_destroy(self) -> None:
        if not self._liveness.is_alive:
            return

        self.logger.info("Tearing down weather controller")
        self._liveness.invalidate()
        try:
            self._permissions.cancel()
            self.stop_location_updates()
        finally:
            await self.fetcher.shutdown(self._config.shutdown_grace_seconds)
        self.logger.info("Weather controller destroyed")

    # Callbacks ----------------------------------------------------------------
    def on_permission_result(self, request_code: int, granted: bool) -> None:
        self.permission_gate.on_result(request_code, granted)

    def _on_permission_denied(self, error: PermissionDeniedError) -> None:
        if not self._liveness.is_alive:
            self.logger.debug("Owner destroyed, ignoring permission denial")
            return
        self.presenter.show_permission_denied(error)

    def on_location_changed(self, position: Position) -> None:
        self.logger.debug("Location changed: %s", position)
        self.fetcher.fetch(position)

    # Location updates ---------------------------------------------------------
    def start_location_updates(self) -> None:
        if not self._liveness.is_alive:
            return
        self.location_source.start()

    def stop_location_updates(self) -> None:
        self.location_source.stop()
