"""Notification scheduler: timed, auto-expiring feedback events and the delete-undo timer.

Timers are keyed by event. Scheduling an event that already has a timer cancels the old
one first, so there is never more than one outstanding delete-undo timer.
"""

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from contactbook.application.dto import Notification
from contactbook.application.ports import TimerBackend, TimerHandle

logger = logging.getLogger(__name__)

DELETE_UNDO_EVENT = "delete-undo"
DEFAULT_DURATION_MS = 5000

KIND_SUCCESS = "success"
KIND_DELETE = "delete"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NotificationScheduler:
    """Owns every pending timer and the notifications currently on screen."""

    def __init__(
        self,
        backend: TimerBackend,
        *,
        default_duration_ms: int = DEFAULT_DURATION_MS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._backend = backend
        self._default_duration_ms = default_duration_ms
        self._clock = clock
        self._lock = threading.RLock()
        self._timers: dict[str, tuple[object, TimerHandle]] = {}
        self._notifications: dict[str, Notification] = {}
        self._listeners: list[Callable[[Notification], None]] = []

    def subscribe(self, listener: Callable[[Notification], None]) -> None:
        """Call listener with every notification emitted from now on."""
        self._listeners.append(listener)

    def schedule(
        self,
        event: str,
        duration_ms: int,
        on_expire: Callable[[], None] | None = None,
    ) -> datetime:
        """Start a cancellable timer for event. Returns the time it will expire.

        An existing timer for the same event is cancelled and never fires.
        """
        expires_at = self._clock() + timedelta(milliseconds=duration_ms)
        token = object()

        def fire() -> None:
            with self._lock:
                entry = self._timers.get(event)
                if entry is None or entry[0] is not token:
                    return
                del self._timers[event]
                self._notifications.pop(event, None)
            logger.debug("Timer expired: %s", event)
            if on_expire is not None:
                on_expire()

        with self._lock:
            self._cancel_locked(event)
            handle = self._backend.call_later(duration_ms / 1000.0, fire)
            self._timers[event] = (token, handle)
        return expires_at

    def cancel(self, event: str) -> bool:
        """Abort the timer for event without firing it. Returns False if none was pending."""
        with self._lock:
            return self._cancel_locked(event)

    def _cancel_locked(self, event: str) -> bool:
        entry = self._timers.pop(event, None)
        self._notifications.pop(event, None)
        if entry is None:
            return False
        entry[1].cancel()
        return True

    def notify(
        self,
        message: str,
        *,
        kind: str = KIND_SUCCESS,
        duration_ms: int | None = None,
    ) -> Notification:
        """Emit a generic notification with its own independent expiry timer."""
        notification_id = str(uuid.uuid4())
        return self._emit(
            event=notification_id,
            notification_id=notification_id,
            message=message,
            kind=kind,
            duration_ms=duration_ms,
            on_expire=None,
        )

    def arm_delete_undo(
        self,
        message: str,
        on_expire: Callable[[], None],
        *,
        duration_ms: int | None = None,
    ) -> Notification:
        """Start the undo window, replacing any previous one. on_expire runs when it elapses."""
        return self._emit(
            event=DELETE_UNDO_EVENT,
            notification_id=str(uuid.uuid4()),
            message=message,
            kind=KIND_DELETE,
            duration_ms=duration_ms,
            on_expire=on_expire,
        )

    def cancel_delete_undo(self) -> bool:
        return self.cancel(DELETE_UNDO_EVENT)

    def _emit(
        self,
        *,
        event: str,
        notification_id: str,
        message: str,
        kind: str,
        duration_ms: int | None,
        on_expire: Callable[[], None] | None,
    ) -> Notification:
        if duration_ms is None:
            duration_ms = self._default_duration_ms
        with self._lock:
            expires_at = self.schedule(event, duration_ms, on_expire)
            notification = Notification(
                id=notification_id,
                event=event,
                message=message,
                kind=kind,
                expires_at=expires_at,
            )
            # re-insert so dict order stays oldest -> newest
            self._notifications.pop(event, None)
            self._notifications[event] = notification
        for listener in list(self._listeners):
            listener(notification)
        return notification

    def active(self) -> list[Notification]:
        """Notifications whose timers have not expired, oldest first."""
        with self._lock:
            return list(self._notifications.values())

    def latest(self) -> Notification | None:
        """The one notification the presentation layer should show."""
        with self._lock:
            if not self._notifications:
                return None
            return next(reversed(self._notifications.values()))
