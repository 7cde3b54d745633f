from __future__ import annotations

import asyncio

import aiohttp

from locweather.config import WeatherConfig
from locweather.exceptions import WeatherFetchError
from locweather.location import Position
from locweather.shared import LoggingMixin


class WeatherClient(LoggingMixin):
    """Thin aiohttp wrapper around the OpenWeather current weather endpoint.

    The session, and with it the connection pool, is created lazily on the
    loop of the first request and shared by every request after that.
    """

    def __init__(self, config: WeatherConfig):
        self._config = config
        self._session: aiohttp.ClientSession | None = None

    @property
    def timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=None,
            connect=self._config.connect_timeout_seconds,
            sock_connect=self._config.connect_timeout_seconds,
            sock_read=self._config.read_timeout_seconds,
        )

    def build_params(self, position: Position) -> dict[str, str]:
        return {
            "lat": f"{position.latitude:f}",
            "lon": f"{position.longitude:f}",
            "appid": self._config.api_key.get_secret_value(),
        }

    async def fetch_current(self, position: Position) -> str:
        """Return the raw JSON body for ``position``.

        Raises:
            WeatherFetchError: on I/O errors, timeouts or an empty body
        """
        session = self._ensure_session()
        self.logger.debug(
            "Fetching weather for %.4f, %.4f", position.latitude, position.longitude
        )

        try:
            async with session.get(
                self._config.weather_url, params=self.build_params(position)
            ) as response:
                status = response.status
                body = await response.text()
        except asyncio.TimeoutError as e:
            raise WeatherFetchError("Weather request timed out") from e
        except aiohttp.ClientError as e:
            raise WeatherFetchError(f"Weather request failed: {e}") from e
        except UnicodeDecodeError as e:
            raise WeatherFetchError("Weather response could not be decoded") from e

        if status != 200:
            self.logger.warning("Weather API responded with status %d", status)

        if not body:
            raise WeatherFetchError("Weather API returned an empty body")

        return body

    async def close(self) -> None:
        if self._session is None:
            return

        if not self._session.closed:
            await self._session.close()
            self.logger.debug("HTTP session closed")
        self._session = None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session
