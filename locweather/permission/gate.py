from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from locweather.exceptions import PermissionDeniedError
from locweather.permission.ports import PermissionProvider
from locweather.shared import LoggingMixin


class GateState(Enum):
    UNCHECKED = "unchecked"
    AWAITING_USER = "awaiting_user"
    GRANTED = "granted"
    DENIED = "denied"

    def __str__(self) -> str:
        return self.value


class PermissionGate(LoggingMixin):
    """Makes sure location access is authorized before anything else happens.

    The user is asked at most once per gate; the answer is evaluated exactly
    once and never re-prompted automatically.
    """

    def __init__(
        self,
        provider: PermissionProvider,
        request_code: int,
        on_granted: Callable[[], None],
        on_denied: Callable[[PermissionDeniedError], None],
    ):
        self._provider = provider
        self._request_code = request_code
        self._on_granted = on_granted
        self._on_denied = on_denied
        self._state = GateState.UNCHECKED

    @property
    def state(self) -> GateState:
        return self._state

    def evaluate(self) -> None:
        if self._state is not GateState.UNCHECKED:
            self.logger.debug("Gate already evaluated (%s)", self._state)
            return

        if self._provider.is_granted():
            self.logger.info("Location permission already granted")
            self._state = GateState.GRANTED
            self._on_granted()
            return

        self.logger.info("Requesting location permission (code %d)", self._request_code)
        self._state = GateState.AWAITING_USER
        self._provider.request(self._request_code, self.on_result)

    def on_result(self, request_code: int, granted: bool) -> None:
        if request_code != self._request_code:
            self.logger.debug("Ignoring permission result for code %d", request_code)
            return

        if self._state is not GateState.AWAITING_USER:
            self.logger.debug("Ignoring late permission result (%s)", self._state)
            return

        if granted:
            self.logger.info("Location permission granted")
            self._state = GateState.GRANTED
            self._on_granted()
        else:
            self.logger.warning("Location permission denied")
            self._state = GateState.DENIED
            self._on_denied(
                PermissionDeniedError(f"permission request {request_code} denied")
            )
