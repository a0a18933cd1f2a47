"""
Contactbook core: clean-architecture layout.

- domain: the Contact entity. No outer dependencies.
- application: use cases (ContactService), validation, the derived view, notifications, ports.
- infrastructure: adapters (InMemoryContactRepository, timer backends, seed loading).
"""

from contactbook.application import (
    ContactFields,
    ContactRepository,
    ContactService,
    DeleteRequested,
    NotificationScheduler,
    NothingPending,
    NotFound,
    ValidationFailed,
)
from contactbook.domain import Contact
from contactbook.infrastructure import (
    AsyncioTimerBackend,
    InMemoryContactRepository,
    ThreadingTimerBackend,
)

__all__ = [
    "AsyncioTimerBackend",
    "Contact",
    "ContactFields",
    "ContactRepository",
    "ContactService",
    "DeleteRequested",
    "InMemoryContactRepository",
    "NotificationScheduler",
    "NothingPending",
    "NotFound",
    "ThreadingTimerBackend",
    "ValidationFailed",
]
