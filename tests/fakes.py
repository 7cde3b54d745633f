"""Platform fakes and helpers shared by the test modules."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from locweather.location import Position

PARIS_PAYLOAD = (
    '{"name":"Paris","weather":[{"description":"clear sky"}],"main":{"temp":295.15}}'
)
PARIS_TEXT = "Location: Paris\nWeather: clear sky\nTemperature: 22.0°C"
NEW_YORK = Position(latitude=40.7128, longitude=-74.0060)


class RecordingDisplay:
    def __init__(self):
        self.texts: list[str] = []

    @property
    def text(self) -> str:
        return self.texts[-1] if self.texts else ""

    def set_text(self, text: str) -> None:
        self.texts.append(text)


class RecordingNotifier:
    def __init__(self):
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakePermissionProvider:
    def __init__(self, granted: bool = True):
        self.granted = granted
        self.requests: list[tuple[int, Callable[[int, bool], None]]] = []
        self.cancelled = 0

    def is_granted(self) -> bool:
        return self.granted

    def request(self, request_code: int, callback) -> None:
        self.requests.append((request_code, callback))

    def cancel(self) -> None:
        self.cancelled += 1

    def answer(self, granted: bool) -> None:
        request_code, callback = self.requests[-1]
        self.granted = granted
        callback(request_code, granted)


class FakeLocationProvider:
    def __init__(self, last_known: Position | None = None, error: Exception | None = None):
        self.last_known = last_known
        self.error = error
        self.subscriptions: list[tuple[int, float, object]] = []
        self.removed: list[object] = []

    def request_updates(self, min_interval_ms, min_distance_m, listener) -> None:
        if self.error is not None:
            raise self.error
        self.subscriptions.append((min_interval_ms, min_distance_m, listener))

    def remove_updates(self, listener) -> None:
        self.removed.append(listener)

    def last_known_position(self) -> Position | None:
        return self.last_known


class FakeWeatherClient:
    """Stands in for WeatherClient; runs on the worker loop like the real one."""

    def __init__(self, payload: str = PARIS_PAYLOAD, delay: float = 0.0):
        self.payload = payload
        self.delay = delay
        self.error: Exception | None = None
        self.calls: list[Position] = []
        self.closed = False

    async def fetch_current(self, position: Position) -> str:
        self.calls.append(position)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.payload

    async def close(self) -> None:
        self.closed = True


async def wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.01)
