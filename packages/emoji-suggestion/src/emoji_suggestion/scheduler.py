"""
Timer primitives for the suggestion engine.

Everything runs on one event loop: callbacks fire on the loop thread, so
state touched from them needs no locking.  ``asyncio`` loops satisfy the
``Scheduler`` protocol directly.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class TimerHandle(Protocol):
    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...

    def call_soon(self, callback: Callable[[], None]) -> TimerHandle: ...


class EventLoopScheduler:
    """
    Scheduler backed by an asyncio event loop.

    The loop is resolved on first use, preferring the running loop, so the
    scheduler can be built before the host starts its loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        # A running loop always wins; the cached one is only for callers
        # outside any loop.
        try:
            self._loop = asyncio.get_running_loop()
            return self._loop
        except RuntimeError:
            pass
        if self._loop is None or self._loop.is_closed():
            try:
                self._loop = asyncio.get_event_loop()
            except RuntimeError:
                self._loop = asyncio.new_event_loop()
                asyncio.set_event_loop(self._loop)
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return self._get_loop().call_later(delay, callback)

    def call_soon(self, callback: Callable[[], None]) -> TimerHandle:
        return self._get_loop().call_soon(callback)


class Debouncer:
    """
    At most one pending call.  Scheduling replaces the pending call, and a
    generation counter captured at schedule time guarantees only the newest
    timer can run even if an older one was already queued when cancelled.
    """

    def __init__(self, scheduler: Scheduler, delay_ms: int) -> None:
        self._scheduler = scheduler
        self._delay = delay_ms / 1000.0
        self._generation = 0
        self._handle: TimerHandle | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, fn: Callable[[], None]) -> int:
        """Arm a new timer for *fn*, superseding any pending one."""
        self._cancel_handle()
        self._generation += 1
        generation = self._generation

        def _fire() -> None:
            if generation != self._generation:
                logger.debug("Dropping stale debounced call (generation %d, current %d)",
                             generation, self._generation)
                return
            self._handle = None
            fn()

        self._handle = self._scheduler.call_later(self._delay, _fire)
        return generation

    def cancel(self) -> None:
        self._cancel_handle()
        self._generation += 1

    def _cancel_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
