from __future__ import annotations

import asyncio
import functools

import click

from locweather.permission.ports import PermissionCallback
from locweather.shared import LoggingMixin


class ConsolePermissionProvider(LoggingMixin):
    """Asks the terminal user for location access."""

    PROMPT = "Allow locweather to use your location for weather updates?"

    def __init__(self, assume_granted: bool = False):
        self._granted = assume_granted
        self._prompt_task: asyncio.Task | None = None

    def is_granted(self) -> bool:
        return self._granted

    def request(self, request_code: int, callback: PermissionCallback) -> None:
        if self._prompt_task and not self._prompt_task.done():
            self.logger.warning("Permission prompt already open")
            return

        self._prompt_task = asyncio.get_running_loop().create_task(
            self._prompt(request_code, callback), name="permission_prompt"
        )

    def cancel(self) -> None:
        if self._prompt_task and not self._prompt_task.done():
            self.logger.debug("Cancelling open permission prompt")
            self._prompt_task.cancel()

    async def _prompt(self, request_code: int, callback: PermissionCallback) -> None:
        loop = asyncio.get_running_loop()
        # click.confirm blocks on stdin, keep it off the UI loop
        try:
            granted = await loop.run_in_executor(
                None, functools.partial(click.confirm, self.PROMPT, default=True)
            )
        except click.Abort:
            self.logger.info("Permission prompt aborted, treating as denied")
            granted = False

        self._granted = granted
        callback(request_code, granted)
