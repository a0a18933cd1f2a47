"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import InMemoryContactRepository
from contactbook.infrastructure.phone import format_international, normalize_phone
from contactbook.infrastructure.seed import load_seed_contacts
from contactbook.infrastructure.timers import AsyncioTimerBackend, ThreadingTimerBackend

__all__ = [
    "AsyncioTimerBackend",
    "InMemoryContactRepository",
    "ThreadingTimerBackend",
    "format_international",
    "load_seed_contacts",
    "normalize_phone",
]
