"""Input and result values exchanged between the presentation layer and ContactService.

Every recoverable error is returned as one of these values; nothing is raised across the
service boundary.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from contactbook.domain import Contact


class ErrorKind(str, Enum):
    REQUIRED_FIELD_MISSING = "RequiredFieldMissing"
    INVALID_FORMAT = "InvalidFormat"
    DUPLICATE_PHONE = "DuplicatePhone"


@dataclass(frozen=True)
class FieldError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ContactFields:
    """Raw form input for add/edit. Text may be empty or padded; it is trimmed on save."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str | None = None
    address: str | None = None
    birthday: date | str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate(). field_errors maps field name -> first problem found for it."""

    field_errors: dict[str, FieldError] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.field_errors


@dataclass(frozen=True)
class ValidationFailed:
    field_errors: dict[str, FieldError]


@dataclass(frozen=True)
class NotFound:
    contact_id: str


@dataclass(frozen=True)
class NothingPending:
    pass


@dataclass(frozen=True)
class DeleteRequested:
    """Contact moved to the pending-deletion slot; restorable until expires_at."""

    contact: Contact
    expires_at: datetime


@dataclass(frozen=True)
class Insights:
    total: int
    favorites: int


@dataclass(frozen=True)
class Notification:
    """Transient feedback record for the presentation layer to show and auto-dismiss."""

    id: str
    event: str
    message: str
    kind: str
    expires_at: datetime
