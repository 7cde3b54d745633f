from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from locweather.shared import LoggingMixin


class UiContext(LoggingMixin):
    """The single event loop allowed to touch the display."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop or asyncio.get_running_loop()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        """Schedule ``callback`` on the UI loop; safe to call from any thread."""
        try:
            self._loop.call_soon_threadsafe(callback, *args)
        except RuntimeError:
            # loop already closed, nobody is left to show anything to
            self.logger.debug("UI loop closed, dropping %s", callback)
