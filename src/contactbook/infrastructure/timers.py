"""Timer backends for NotificationScheduler. Both return handles whose cancel() is exact."""

import asyncio
import threading
from collections.abc import Callable


class AsyncioTimerBackend:
    """Schedules callbacks on an asyncio event loop (the cooperative model).

    Must be used from the loop's own thread; pass loop explicitly or call from inside it.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(delay_seconds, 0.0), callback)


class ThreadingTimerBackend:
    """Runs each callback on its own daemon timer thread. Callers must serialize state access."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(max(delay_seconds, 0.0), callback)
        timer.daemon = True
        timer.start()
        return timer
