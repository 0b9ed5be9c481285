"""Shared fixtures for emoji_suggestion tests."""
from __future__ import annotations

from typing import Callable

import pytest


class ManualHandle:
    def __init__(self, when: float, seq: int, callback: Callable[[], None]) -> None:
        self.when = when
        self.seq = seq
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual-clock scheduler: nothing runs until the test advances time."""

    def __init__(self) -> None:
        self.now = 0.0
        self.scheduled = 0
        self._seq = 0
        self._queue: list[ManualHandle] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        self._seq += 1
        self.scheduled += 1
        handle = ManualHandle(self.now + delay, self._seq, callback)
        self._queue.append(handle)
        return handle

    def call_soon(self, callback: Callable[[], None]) -> ManualHandle:
        return self.call_later(0, callback)

    @property
    def pending(self) -> int:
        return sum(1 for h in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            ready = [h for h in self._queue if not h.cancelled and h.when <= target + 1e-9]
            if not ready:
                break
            handle = min(ready, key=lambda h: (h.when, h.seq))
            self._queue.remove(handle)
            self.now = max(self.now, handle.when)
            handle.callback()
        self._queue = [h for h in self._queue if not h.cancelled]
        self.now = target

    def run_ready(self) -> None:
        self.advance(0)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def corpus_names() -> list[str]:
    return [
        "smile",
        "smiley",
        "smile_cat",
        "sweat_smile",
        "heart",
        "heart_eyes",
        "thumbsup",
        "thumbsdown",
        "rocket",
    ]
