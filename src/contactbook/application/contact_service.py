"""Contact directory use cases: add, edit, favorite, delete with undo, search. One service per user."""

import logging
import threading
import uuid

from contactbook.application.dto import (
    ContactFields,
    DeleteRequested,
    Insights,
    Notification,
    NothingPending,
    NotFound,
    ValidationFailed,
)
from contactbook.application.notifications import DEFAULT_DURATION_MS, NotificationScheduler
from contactbook.application.ports import ContactRepository
from contactbook.application.query import derive
from contactbook.application.validation import parse_birthday, validate
from contactbook.domain import Contact

logger = logging.getLogger(__name__)


def _optional(value: str | None) -> str | None:
    return (value or "").strip() or None


def _contact_from_fields(
    fields: ContactFields,
    *,
    contact_id: str | None = None,
    is_favorite: bool = False,
) -> Contact:
    """Build a Contact from already-validated input. Text is trimmed, empty optionals become None."""
    values = dict(
        name=fields.name.strip(),
        email=fields.email.strip(),
        phone=fields.phone.strip(),
        location=_optional(fields.location),
        address=_optional(fields.address),
        birthday=parse_birthday(fields.birthday),
        is_favorite=is_favorite,
    )
    if contact_id is not None:
        values["id"] = contact_id
    return Contact(**values)


class ContactService:
    """Validate -> mutate -> derive view -> notify.

    All mutations and timer expiry are serialized by one lock, so undo and expiry of the
    same deletion can never both succeed.
    """

    def __init__(
        self,
        repository: ContactRepository,
        scheduler: NotificationScheduler,
        *,
        undo_window_ms: int = DEFAULT_DURATION_MS,
    ) -> None:
        self._repo = repository
        self._scheduler = scheduler
        self._undo_window_ms = undo_window_ms
        self._lock = threading.RLock()
        self._search_text = ""
        self._pending_token: str | None = None

    @property
    def search_text(self) -> str:
        return self._search_text

    def _phone_holders(self) -> list[Contact]:
        """Active contacts plus the pending deletion, whose phone stays reserved until undo expires."""
        holders = self._repo.list_active()
        if self._repo.pending is not None:
            holders.append(self._repo.pending)
        return holders

    def add_contact(self, fields: ContactFields) -> Contact | ValidationFailed:
        """Validate and store a new contact. It is never a favorite on creation."""
        with self._lock:
            result = validate(fields, self._phone_holders())
            if not result.valid:
                logger.info("Add rejected: %s", sorted(result.field_errors))
                return ValidationFailed(field_errors=result.field_errors)
            contact = self._repo.add(_contact_from_fields(fields))
            logger.info("Contact added: %s", contact.id)
        self._scheduler.notify(f"✓ {contact.name} added successfully!")
        return contact

    def update_contact(
        self, contact_id: str, fields: ContactFields
    ) -> Contact | ValidationFailed | NotFound:
        """Replace the fields of an existing contact. Its id and favorite flag are kept."""
        with self._lock:
            existing = self._repo.get_by_id(contact_id)
            if existing is None:
                logger.info("Update of unknown contact %s", contact_id)
                return NotFound(contact_id=contact_id)
            result = validate(fields, self._phone_holders(), exclude_id=contact_id)
            if not result.valid:
                logger.info("Update of %s rejected: %s", contact_id, sorted(result.field_errors))
                return ValidationFailed(field_errors=result.field_errors)
            updated = self._repo.update(
                _contact_from_fields(
                    fields, contact_id=contact_id, is_favorite=existing.is_favorite
                )
            )
            if isinstance(updated, NotFound):
                return updated
            logger.info("Contact updated: %s", contact_id)
        self._scheduler.notify(f"✓ {updated.name} updated successfully!")
        return updated

    def toggle_favorite(self, contact_id: str) -> Contact | NotFound:
        with self._lock:
            result = self._repo.toggle_favorite(contact_id)
        if isinstance(result, NotFound):
            logger.info("Favorite toggle of unknown contact %s", contact_id)
            return result
        action = "added to" if result.is_favorite else "removed from"
        self._scheduler.notify(f"{result.name} {action} favorites")
        return result

    def request_delete(self, contact_id: str) -> DeleteRequested | NotFound:
        """Soft-delete a contact and start the undo window.

        A deletion that is still pending is discarded for good; only the newest one can be undone.
        """
        with self._lock:
            contact = self._repo.begin_delete(contact_id)
            if isinstance(contact, NotFound):
                logger.info("Delete of unknown contact %s", contact_id)
                return contact
            token = str(uuid.uuid4())
            self._pending_token = token
            notification = self._scheduler.arm_delete_undo(
                f"{contact.name} deleted. Undo?",
                lambda: self._expire_pending(token),
                duration_ms=self._undo_window_ms,
            )
            logger.info("Contact %s pending deletion until %s", contact.id, notification.expires_at)
        return DeleteRequested(contact=contact, expires_at=notification.expires_at)

    def undo_delete(self) -> Contact | NothingPending:
        """Restore the pending deletion (appended to the end of storage order)."""
        with self._lock:
            restored = self._repo.undo_delete()
            if isinstance(restored, NothingPending):
                return restored
            self._pending_token = None
            self._scheduler.cancel_delete_undo()
            logger.info("Contact restored: %s", restored.id)
        self._scheduler.notify(f"{restored.name} restored!")
        return restored

    def _expire_pending(self, token: str) -> None:
        """Undo window elapsed. No-op if an undo or a newer deletion got there first."""
        with self._lock:
            if self._pending_token != token:
                return
            self._pending_token = None
            discarded = self._repo.finalize_delete()
        if discarded is not None:
            logger.info("Contact permanently deleted: %s", discarded.id)

    def set_search_text(self, text: str | None) -> None:
        with self._lock:
            self._search_text = text or ""

    def get_view(self) -> list[Contact]:
        """Filtered and sorted contacts for display, derived from current state on every call."""
        with self._lock:
            return derive(self._repo.list_active(), self._search_text)

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return an active contact by id, or None if not found."""
        with self._lock:
            return self._repo.get_by_id(contact_id)

    def insights(self) -> Insights:
        with self._lock:
            active = self._repo.list_active()
        return Insights(total=len(active), favorites=sum(1 for c in active if c.is_favorite))

    def notifications(self) -> list[Notification]:
        return self._scheduler.active()

    def latest_notification(self) -> Notification | None:
        return self._scheduler.latest()
