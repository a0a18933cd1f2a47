"""Field validation for add/edit. Pure functions of their inputs."""

import re
from collections.abc import Iterable
from datetime import date

from contactbook.application.dto import ContactFields, ErrorKind, FieldError, ValidationResult
from contactbook.domain import Contact

# local@domain.tld, nothing fancier
EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def _clean(value: str | None) -> str:
    return (value or "").strip()


def parse_birthday(value: date | str | None) -> date | None:
    """Return a date for ISO text (YYYY-MM-DD) or a date, None for empty. Raises ValueError on bad text."""
    if value is None or isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    return date.fromisoformat(text)


def phone_in_use(
    phone: str, active_contacts: Iterable[Contact], exclude_id: str | None = None
) -> bool:
    """True if another active contact has the same trimmed phone (case-sensitive)."""
    key = _clean(phone)
    return any(
        c.phone_key == key for c in active_contacts if exclude_id is None or c.id != exclude_id
    )


def validate(
    candidate: ContactFields,
    active_contacts: Iterable[Contact],
    exclude_id: str | None = None,
) -> ValidationResult:
    """Check required fields, email shape and phone uniqueness.

    All fields are checked in one pass so every problem can be shown at once;
    each field reports only its first problem (required before format/duplicate).
    exclude_id skips the contact being edited in the uniqueness check.
    """
    errors: dict[str, FieldError] = {}

    if not _clean(candidate.name):
        errors["name"] = FieldError(ErrorKind.REQUIRED_FIELD_MISSING, "Name is required")

    email = _clean(candidate.email)
    if not email:
        errors["email"] = FieldError(ErrorKind.REQUIRED_FIELD_MISSING, "Email is required")
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = FieldError(ErrorKind.INVALID_FORMAT, "Email is invalid")

    phone = _clean(candidate.phone)
    if not phone:
        errors["phone"] = FieldError(ErrorKind.REQUIRED_FIELD_MISSING, "Phone is required")
    elif phone_in_use(phone, active_contacts, exclude_id):
        errors["phone"] = FieldError(ErrorKind.DUPLICATE_PHONE, "Phone number already exists")

    try:
        parse_birthday(candidate.birthday)
    except ValueError:
        errors["birthday"] = FieldError(ErrorKind.INVALID_FORMAT, "Birthday is invalid")

    return ValidationResult(field_errors=errors)
