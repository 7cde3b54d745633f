from __future__ import annotations

import asyncio
import concurrent.futures
import functools
import threading
from collections.abc import Awaitable, Callable
from typing import TypeVar

from locweather.shared.logging_mixin import LoggingMixin

T = TypeVar("T")


class BackgroundWorker(LoggingMixin):
    """Single background thread with its own event loop.

    Jobs run one at a time in the order they were submitted. Results come back
    as ``concurrent.futures.Future`` objects so callers on other threads can
    attach continuations.
    """

    def __init__(self, name: str = "BackgroundWorker"):
        self._name = name
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._job_lock: asyncio.Lock | None = None
        self._started = threading.Event()
        self._pending: set[concurrent.futures.Future] = set()
        self._pending_lock = threading.Lock()
        self._accepting = True

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def is_accepting(self) -> bool:
        return self._accepting

    def start(self) -> None:
        if self._thread is not None:
            return

        self._thread = threading.Thread(
            target=self._run_loop, name=self._name, daemon=True
        )
        self._thread.start()
        self._started.wait()
        self.logger.debug("Worker thread %s started", self._name)

    def submit(
        self, job: Callable[[], Awaitable[T]]
    ) -> concurrent.futures.Future[T]:
        if not self._accepting:
            raise RuntimeError(f"{self._name} is shut down")

        self.start()
        future = asyncio.run_coroutine_threadsafe(self._run_in_order(job), self._loop)
        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    async def shutdown(
        self,
        grace_seconds: float,
        finalizer: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        """Drain queued jobs for up to ``grace_seconds``, cancel the rest, then stop.

        ``finalizer`` runs on the worker loop after the jobs are gone, which is
        where loop-bound resources such as HTTP sessions must be closed.
        """
        if not self._accepting:
            return
        self._accepting = False

        if self._thread is None:
            return

        caller_loop = asyncio.get_running_loop()
        pending = self._snapshot_pending()
        if pending:
            self.logger.debug("Waiting for %d job(s) to finish", len(pending))
            _, not_done = await caller_loop.run_in_executor(
                None,
                functools.partial(
                    concurrent.futures.wait, pending, timeout=grace_seconds
                ),
            )
            if not_done:
                self.logger.warning(
                    "%d job(s) still running after %.1fs, cancelling",
                    len(not_done),
                    grace_seconds,
                )
                for future in not_done:
                    future.cancel()

        try:
            if finalizer is not None:
                await asyncio.wrap_future(
                    asyncio.run_coroutine_threadsafe(finalizer(), self._loop)
                )
        finally:
            self._loop.call_soon_threadsafe(self._loop.stop)
            await caller_loop.run_in_executor(
                None, self._thread.join, max(grace_seconds, 1.0)
            )
            self.logger.debug("Worker thread %s stopped", self._name)

    async def _run_in_order(self, job: Callable[[], Awaitable[T]]) -> T:
        async with self._job_lock:
            return await job()

    def _run_loop(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._job_lock = asyncio.Lock()
        self._started.set()

        try:
            loop.run_forever()
        finally:
            self._cancel_leftover_tasks(loop)
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.close()

    def _cancel_leftover_tasks(self, loop: asyncio.AbstractEventLoop) -> None:
        leftovers = asyncio.all_tasks(loop)
        if not leftovers:
            return

        for task in leftovers:
            task.cancel()
        loop.run_until_complete(asyncio.gather(*leftovers, return_exceptions=True))

    def _snapshot_pending(self) -> list[concurrent.futures.Future]:
        with self._pending_lock:
            return list(self._pending)

    def _forget(self, future: concurrent.futures.Future) -> None:
        with self._pending_lock:
            self._pending.discard(future)
