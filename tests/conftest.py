"""Shared fixtures."""

from __future__ import annotations

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from locweather.config import WeatherConfig
from locweather.controller import WeatherController
from tests.fakes import (
    FakeLocationProvider,
    FakePermissionProvider,
    FakeWeatherClient,
    RecordingDisplay,
    RecordingNotifier,
)


@pytest.fixture
def config() -> WeatherConfig:
    return WeatherConfig(api_key="test-key")


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def permissions() -> FakePermissionProvider:
    return FakePermissionProvider(granted=True)


@pytest.fixture
def location_provider() -> FakeLocationProvider:
    return FakeLocationProvider()


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient()


@pytest_asyncio.fixture
async def make_controller(config, permissions, location_provider, display, notifier, weather_client):
    controllers: list[WeatherController] = []

    def _make(cfg: WeatherConfig | None = None) -> WeatherController:
        controller = WeatherController(
            config=cfg or config,
            permissions=permissions,
            location_provider=location_provider,
            display=display,
            notifier=notifier,
            weather_client=weather_client,
        )
        controllers.append(controller)
        return controller

    yield _make

    for controller in controllers:
        await controller.on_destroy()


@pytest_asyncio.fixture
async def serve():
    """Start a local HTTP server for a GET handler and return its URL."""
    servers: list[TestServer] = []

    async def _serve(handler, path: str = "/data/2.5/weather") -> str:
        app = web.Application()
        app.router.add_get(path, handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return str(server.make_url(path))

    yield _serve

    for server in servers:
        await server.close()
