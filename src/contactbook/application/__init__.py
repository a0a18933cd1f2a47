"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    ContactFields,
    DeleteRequested,
    ErrorKind,
    FieldError,
    Insights,
    Notification,
    NothingPending,
    NotFound,
    ValidationFailed,
    ValidationResult,
)
from contactbook.application.notifications import DELETE_UNDO_EVENT, NotificationScheduler
from contactbook.application.ports import ContactRepository, TimerBackend
from contactbook.application.query import derive
from contactbook.application.validation import validate

__all__ = [
    "ContactFields",
    "ContactRepository",
    "ContactService",
    "DELETE_UNDO_EVENT",
    "DeleteRequested",
    "ErrorKind",
    "FieldError",
    "Insights",
    "Notification",
    "NotificationScheduler",
    "NothingPending",
    "NotFound",
    "TimerBackend",
    "ValidationFailed",
    "ValidationResult",
    "derive",
    "validate",
]
