"""Cooperative per-frame loop driving the animation engine."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from typing import Any, TypeAlias

logger = logging.getLogger(__name__)

# Called once per frame on the event loop.
TickCallback: TypeAlias = Callable[[], Any]


class Scheduler:
    """Runs *callback* once per frame on the running event loop.

    Single-threaded: the callback runs between awaits, so state it mutates
    needs no locking.  :meth:`stop` cancels the loop and waits for it to
    finish, giving deterministic teardown.
    """

    def __init__(self, callback: TickCallback, *, fps: int = 60) -> None:
        if fps <= 0:
            msg = "fps must be positive"
            raise ValueError(msg)
        self._callback = callback
        self.interval = 1.0 / fps
        self._task: asyncio.Task[None] | None = None
        self._ticks = 0

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def step(self) -> None:
        """Run a single tick, logging callback failures."""
        self._ticks += 1
        try:
            self._callback()
        except Exception:
            logger.exception("Frame callback failed on tick %d", self._ticks)

    async def run(self, max_ticks: int | None = None) -> None:
        """Tick until cancelled, or until *max_ticks* ticks have run."""
        done = 0
        while max_ticks is None or done < max_ticks:
            self.step()
            done += 1
            await asyncio.sleep(self.interval)

    def start(self, max_ticks: int | None = None) -> asyncio.Task[None]:
        """Schedule :meth:`run` as a task on the running loop."""
        if self.running:
            msg = "scheduler is already running"
            raise RuntimeError(msg)
        self._task = asyncio.create_task(self.run(max_ticks), name="signavatar-scheduler")
        return self._task

    async def stop(self) -> None:
        """Cancel the loop and wait for it to exit."""
        task = self._task
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        self._task = None
        logger.debug("Scheduler stopped after %d ticks", self._ticks)
