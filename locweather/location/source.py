from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from locweather.config import WeatherConfig
from locweather.exceptions import LocationSubscriptionError
from locweather.location.ports import LocationListener, LocationProvider
from locweather.permission.ports import PermissionProvider
from locweather.shared import LoggingMixin


class LocationSourceState(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"

    def __str__(self) -> str:
        return self.value


class LocationSource(LoggingMixin):
    """Owns the location subscription and forwards every fix to the listener.

    Only touched from the UI context, so the state flag needs no locking.
    """

    def __init__(
        self,
        provider: LocationProvider,
        permissions: PermissionProvider,
        config: WeatherConfig,
        listener: LocationListener,
        on_error: Callable[[LocationSubscriptionError], None],
    ):
        self._provider = provider
        self._permissions = permissions
        self._config = config
        self._listener = listener
        self._on_error = on_error
        self._state = LocationSourceState.INACTIVE

    @property
    def state(self) -> LocationSourceState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is LocationSourceState.ACTIVE

    def start(self) -> None:
        if self.is_active:
            self.logger.debug("Location updates already active")
            return

        if not self._permissions.is_granted():
            self.logger.debug("Location permission missing, not subscribing")
            return

        try:
            self._provider.request_updates(
                self._config.min_update_interval_ms,
                self._config.min_distance_m,
                self._listener,
            )
        except (PermissionError, ValueError) as e:
            error = LocationSubscriptionError(f"Error starting location updates: {e}")
            self.logger.error("%s", error, exc_info=e)
            self._on_error(error)
            return

        self._state = LocationSourceState.ACTIVE
        self.logger.info(
            "Location updates started (every %d ms, %.0f m)",
            self._config.min_update_interval_ms,
            self._config.min_distance_m,
        )

        self._deliver_last_known()

    def stop(self) -> None:
        if not self.is_active:
            return

        try:
            self._provider.remove_updates(self._listener)
        except PermissionError:
            self.logger.exception("Error stopping location updates")
        self._state = LocationSourceState.INACTIVE
        self.logger.info("Location updates stopped")

    def _deliver_last_known(self) -> None:
        try:
            position = self._provider.last_known_position()
        except PermissionError as e:
            error = LocationSubscriptionError(f"Error reading last known location: {e}")
            self.logger.error("%s", error, exc_info=e)
            self._on_error(error)
            return

        if position is None:
            self.logger.debug("No last known position yet")
            return

        self.logger.debug("Using last known position %s", position)
        self._listener.on_location_changed(position)
