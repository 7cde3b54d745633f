from __future__ import annotations

import asyncio

import aiohttp

from locweather.location.geo import distance_m
from locweather.location.models import IpLocation, Position
from locweather.location.ports import LocationListener
from locweather.shared import LoggingMixin


class FixedLocationProvider(LoggingMixin):
    """A device that never moves: the given position is always the last known fix."""

    def __init__(self, position: Position):
        self._position = position
        self._listeners: list[LocationListener] = []

    def request_updates(
        self,
        min_interval_ms: int,
        min_distance_m: float,
        listener: LocationListener,
    ) -> None:
        if min_interval_ms < 0 or min_distance_m < 0:
            raise ValueError("update interval and distance must be non-negative")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_updates(self, listener: LocationListener) -> None:
        self._listeners = [registered for registered in self._listeners if registered is not listener]

    def last_known_position(self) -> Position | None:
        return self._position


class IpGeolocationProvider(LoggingMixin):
    """Approximates the device position from its public IP address.

    Polls the lookup endpoint on the running loop and only reports a fix when
    it moved at least ``min_distance_m`` from the previously reported one.
    """

    DEFAULT_URL = "https://ipapi.co/json/"

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: aiohttp.ClientTimeout | None = None,
    ):
        self._url = url
        self._timeout = timeout or aiohttp.ClientTimeout(total=30)
        self._last_known: Position | None = None
        self._last_delivered: Position | None = None
        self._poll_tasks: dict[int, asyncio.Task] = {}

    def request_updates(
        self,
        min_interval_ms: int,
        min_distance_m: float,
        listener: LocationListener,
    ) -> None:
        if min_interval_ms <= 0:
            raise ValueError(f"Invalid update interval: {min_interval_ms} ms")
        if min_distance_m < 0:
            raise ValueError(f"Invalid minimum distance: {min_distance_m} m")

        self.remove_updates(listener)
        task = asyncio.get_running_loop().create_task(
            self._poll(min_interval_ms / 1000, min_distance_m, listener),
            name="ip_location_poll",
        )
        self._poll_tasks[id(listener)] = task

    def remove_updates(self, listener: LocationListener) -> None:
        task = self._poll_tasks.pop(id(listener), None)
        if task and not task.done():
            task.cancel()

    def last_known_position(self) -> Position | None:
        return self._last_known

    async def lookup(self) -> Position:
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.get(self._url) as response:
                if response.status != 200:
                    raise ValueError(
                        f"Location lookup failed with status {response.status}"
                    )
                data = await response.json(content_type=None)

        return IpLocation.model_validate(data).to_position()

    async def _poll(
        self, interval_s: float, min_distance_m: float, listener: LocationListener
    ) -> None:
        while True:
            try:
                position = await self.lookup()
            except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                self.logger.warning("Location could not be determined: %s", e)
            else:
                self._last_known = position
                if self._has_moved(position, min_distance_m):
                    self._last_delivered = position
                    listener.on_location_changed(position)

            await asyncio.sleep(interval_s)

    def _has_moved(self, position: Position, min_distance_m: float) -> bool:
        if self._last_delivered is None:
            return True
        return distance_m(self._last_delivered, position) >= min_distance_m
