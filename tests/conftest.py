"""Shared fixtures: a deterministic timer backend and a clock that follows it."""

from datetime import datetime, timedelta, timezone

import pytest

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeTimer:
    def __init__(self, due: float, callback) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimerBackend:
    """Timers fire only when the test calls advance()."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay_seconds: float, callback) -> FakeTimer:
        timer = FakeTimer(self.now + delay_seconds, callback)
        self.timers.append(timer)
        return timer

    def clock(self) -> datetime:
        return EPOCH + timedelta(seconds=self.now)

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = sorted(
            (t for t in self.timers if not t.cancelled and t.due <= self.now),
            key=lambda t: t.due,
        )
        for timer in due:
            if timer.cancelled:
                continue
            self.timers.remove(timer)
            timer.callback()

    @property
    def live(self) -> int:
        return sum(1 for t in self.timers if not t.cancelled)


@pytest.fixture
def timers() -> FakeTimerBackend:
    return FakeTimerBackend()
