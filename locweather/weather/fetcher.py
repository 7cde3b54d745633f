from __future__ import annotations

import concurrent.futures
import functools
from collections.abc import Callable
from typing import Protocol

from locweather.exceptions import WeatherFetchError
from locweather.location import Position
from locweather.shared import BackgroundWorker, LivenessToken, LoggingMixin
from locweather.ui.context import UiContext


class WeatherSource(Protocol):
    async def fetch_current(self, position: Position) -> str: ...

    async def close(self) -> None: ...


class WeatherFetcher(LoggingMixin):
    """Runs weather requests on the background worker and reports back on the UI context.

    Every position gets its own request. Nothing is de-duplicated and nothing
    superseded is cancelled, so results show up in whatever order they finish.
    """

    def __init__(
        self,
        client: WeatherSource,
        ui_context: UiContext,
        liveness: LivenessToken,
        on_payload: Callable[[str], None],
        on_error: Callable[[WeatherFetchError], None],
        worker: BackgroundWorker | None = None,
    ):
        self._client = client
        self._ui = ui_context
        self._liveness = liveness
        self._on_payload = on_payload
        self._on_error = on_error
        self._worker = worker or BackgroundWorker(name="WeatherFetcher")

    def fetch(self, position: Position) -> concurrent.futures.Future[str] | None:
        if not self._liveness.is_alive or not self._worker.is_accepting:
            self.logger.debug("Fetcher shut down, dropping %s", position)
            return None

        future = self._worker.submit(
            functools.partial(self._client.fetch_current, position)
        )
        future.add_done_callback(self._resume_on_ui)
        return future

    async def shutdown(self, grace_seconds: float) -> None:
        await self._worker.shutdown(grace_seconds, finalizer=self._client.close)

    def _resume_on_ui(self, future: concurrent.futures.Future[str]) -> None:
        # Runs on the worker thread, the UI context takes it from here
        self._ui.post(self._complete, future)

    def _complete(self, future: concurrent.futures.Future[str]) -> None:
        if not self._liveness.is_alive:
            self.logger.debug("Owner destroyed, discarding weather result")
            return

        if future.cancelled():
            self.logger.debug("Weather request was cancelled")
            return

        error = future.exception()
        if error is None:
            self._on_payload(future.result())
            return

        if not isinstance(error, WeatherFetchError):
            error = WeatherFetchError(f"Unexpected fetch failure: {error!r}")
        self.logger.error("Error fetching weather data: %s", error, exc_info=error)
        self._on_error(error)
