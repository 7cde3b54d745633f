"""
Screen lifecycle: created, foregrounded, backgrounded, destroyed
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import Enum
from typing import Protocol

from locweather.shared import LoggingMixin


class LifecycleObserver(Protocol):
    def on_create(self) -> None: ...

    def on_resume(self) -> None: ...

    def on_pause(self) -> None: ...

    async def on_destroy(self) -> None: ...


class LifecycleState(Enum):
    INITIALIZED = "initialized"
    CREATED = "created"
    RESUMED = "resumed"
    DESTROYED = "destroyed"

    def __str__(self) -> str:
        return self.value


class Lifecycle(LoggingMixin):
    """Dispatches lifecycle events to observers in registration order"""

    def __init__(self):
        self._observers: list[LifecycleObserver] = []
        self._state = LifecycleState.INITIALIZED

    @property
    def state(self) -> LifecycleState:
        return self._state

    def add_observer(self, observer: LifecycleObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: LifecycleObserver) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def create(self) -> None:
        if self._state is not LifecycleState.INITIALIZED:
            self.logger.debug("Ignoring create in state %s", self._state)
            return

        self._move_to(LifecycleState.CREATED)
        for observer in list(self._observers):
            observer.on_create()

    def resume(self) -> None:
        if self._state is not LifecycleState.CREATED:
            self.logger.debug("Ignoring resume in state %s", self._state)
            return

        self._move_to(LifecycleState.RESUMED)
        for observer in list(self._observers):
            observer.on_resume()

    def pause(self) -> None:
        if self._state is not LifecycleState.RESUMED:
            self.logger.debug("Ignoring pause in state %s", self._state)
            return

        self._move_to(LifecycleState.CREATED)
        for observer in list(self._observers):
            observer.on_pause()

    async def destroy(self) -> None:
        if self._state is LifecycleState.DESTROYED:
            return

        self.pause()
        self._move_to(LifecycleState.DESTROYED)
        for observer in list(self._observers):
            await observer.on_destroy()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Lifecycle]:
        """Create and foreground on entry, background and destroy on every exit."""
        try:
            self.create()
            self.resume()
            yield self
        finally:
            await self.destroy()

    def _move_to(self, state: LifecycleState) -> None:
        self.logger.info("Lifecycle %s -> %s", self._state, state)
        self._state = state
