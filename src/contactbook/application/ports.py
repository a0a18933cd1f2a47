"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from contactbook.application.dto import NothingPending, NotFound
from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Owns the active contacts (ordered) and the single pending-deletion slot."""

    def add(self, contact: Contact) -> Contact:
        """Store an already-validated contact at the front. Returns the stored record."""
        ...

    def update(self, contact: Contact) -> Contact | NotFound:
        """Replace the record with the same id."""
        ...

    def toggle_favorite(self, contact_id: str) -> Contact | NotFound:
        """Flip is_favorite on the matching record."""
        ...

    def begin_delete(self, contact_id: str) -> Contact | NotFound:
        """Move a record into the pending slot, discarding whatever was pending before."""
        ...

    def undo_delete(self) -> Contact | NothingPending:
        """Append the pending record back to the active contacts."""
        ...

    def finalize_delete(self, contact_id: str | None = None) -> Contact | None:
        """Discard the pending record (only if it has contact_id, when given)."""
        ...

    def get_by_id(self, contact_id: str) -> Contact | None:
        """Return the active contact with the given id, or None."""
        ...

    def list_active(self) -> list[Contact]:
        """Return active contacts in storage order (newest first, restored at the end)."""
        ...

    @property
    def pending(self) -> Contact | None:
        """The soft-deleted contact awaiting expiry, if any."""
        ...


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class TimerBackend(Protocol):
    """Runs a callback once after a delay. The returned handle cancels it exactly."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        ...
