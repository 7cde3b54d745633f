from collections.abc import Callable
from typing import Protocol

PermissionCallback = Callable[[int, bool], None]


class PermissionProvider(Protocol):
    """Platform authority for fine-grained location access.

    ``request`` must eventually invoke ``callback(request_code, granted)`` on
    the UI context.
    """

    def is_granted(self) -> bool: ...

    def request(self, request_code: int, callback: PermissionCallback) -> None: ...

    def cancel(self) -> None:
        """Drop any open request; its callback must not fire afterwards."""
        ...
