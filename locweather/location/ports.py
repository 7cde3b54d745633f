from typing import Protocol

from locweather.location.models import Position


class LocationListener(Protocol):
    def on_location_changed(self, position: Position) -> None: ...


class LocationProvider(Protocol):
    """Platform location service.

    ``request_updates`` raises ``PermissionError`` when access was revoked and
    ``ValueError`` when the provider or its arguments are invalid. Updates are
    delivered on the UI context.
    """

    def request_updates(
        self,
        min_interval_ms: int,
        min_distance_m: float,
        listener: LocationListener,
    ) -> None: ...

    def remove_updates(self, listener: LocationListener) -> None: ...

    def last_known_position(self) -> Position | None: ...
