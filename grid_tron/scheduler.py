"""Fixed-interval tick schedulers.

A scheduler calls a synchronous ``callback`` once per ``interval`` seconds.
``start`` and ``stop`` are idempotent: starting a running scheduler never
creates a second timer and stopping an idle one does nothing, so the
controller can call them on every lifecycle transition.

* ``AsyncioTickScheduler`` drives the callback from a task on the running
    event loop. The first tick fires one interval after ``start``. The callback
    runs to completion before the next sleep, so two ticks never overlap, and
    an exception raised by it is logged without ending the loop.
* ``ManualScheduler`` only ticks when :meth:`ManualScheduler.advance` is
    called; used for headless runs and tests.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], Any]


class Scheduler(Protocol):
    interval: float

    @property
    def running(self) -> bool: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...


class AsyncioTickScheduler:
    """Run ``callback`` every ``interval`` seconds on the current event loop."""

    def __init__(self, interval: float, callback: TickCallback) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._callback = callback
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking.

        Raises:
            RuntimeError: If called outside a running event loop.
        """
        if self.running:
            return
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run())
        logger.debug("Tick scheduler started (interval=%.3fs)", self.interval)

    def stop(self) -> None:
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
        self._task = None
        logger.debug("Tick scheduler stopped")

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        elapsed = 0.0
        while True:
            await asyncio.sleep(max(0.0, self.interval - elapsed))
            started = loop.time()
            try:
                self._callback()
            except Exception:
                logger.exception("Tick callback failed")
            elapsed = loop.time() - started


class ManualScheduler:
    """Scheduler that ticks only on demand."""

    def __init__(self, interval: float, callback: TickCallback) -> None:
        self.interval = interval
        self._callback = callback
        self._running = False
        self.starts = 0
        self.stops = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self.starts += 1

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self.stops += 1

    def advance(self, ticks: int = 1) -> int:
        """Invoke the callback up to ``ticks`` times while running.

        Returns:
            int: Number of callbacks actually made (stops early if the callback
                stopped the scheduler).
        """
        made = 0
        for _ in range(ticks):
            if not self._running:
                break
            self._callback()
            made += 1
        return made
