"""In-memory implementation of ContactRepository (the collection store)."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from contactbook.application.dto import NothingPending, NotFound
from contactbook.domain import Contact, new_contact_id

logger = logging.getLogger(__name__)


class InMemoryContactRepository:
    """Stores active contacts in memory, newest first. Holds at most one pending deletion.
    Ids are never reused: every id ever stored is remembered, including discarded ones.
    """

    def __init__(self, seed: Iterable[Contact] = ()) -> None:
        self._by_id: dict[str, Contact] = {}
        self._order: list[str] = []
        self._issued: set[str] = set()
        self._pending: Contact | None = None
        for contact in seed:
            if contact.id in self._issued:
                contact = replace(contact, id=self._fresh_id())
            self._by_id[contact.id] = contact
            self._order.append(contact.id)
            self._issued.add(contact.id)

    def _fresh_id(self) -> str:
        contact_id = new_contact_id()
        while contact_id in self._issued:
            contact_id = new_contact_id()
        return contact_id

    @property
    def pending(self) -> Contact | None:
        return self._pending

    def add(self, contact: Contact) -> Contact:
        contact_id = contact.id
        if contact_id in self._issued:
            contact_id = self._fresh_id()
        stored = replace(contact, id=contact_id, is_favorite=False)
        self._by_id[stored.id] = stored
        self._order.insert(0, stored.id)
        self._issued.add(stored.id)
        return stored

    def update(self, contact: Contact) -> Contact | NotFound:
        if contact.id not in self._by_id:
            return NotFound(contact_id=contact.id)
        self._by_id[contact.id] = contact
        return contact

    def toggle_favorite(self, contact_id: str) -> Contact | NotFound:
        contact = self._by_id.get(contact_id)
        if contact is None:
            return NotFound(contact_id=contact_id)
        toggled = contact.with_favorite(not contact.is_favorite)
        self._by_id[contact_id] = toggled
        return toggled

    def begin_delete(self, contact_id: str) -> Contact | NotFound:
        contact = self._by_id.pop(contact_id, None)
        if contact is None:
            return NotFound(contact_id=contact_id)
        self._order.remove(contact_id)
        if self._pending is not None:
            logger.info("Pending deletion of %s superseded; discarded", self._pending.id)
        self._pending = contact
        return contact

    def undo_delete(self) -> Contact | NothingPending:
        contact = self._pending
        if contact is None:
            return NothingPending()
        self._pending = None
        self._by_id[contact.id] = contact
        self._order.append(contact.id)
        return contact

    def finalize_delete(self, contact_id: str | None = None) -> Contact | None:
        contact = self._pending
        if contact is None:
            return None
        if contact_id is not None and contact.id != contact_id:
            return None
        self._pending = None
        return contact

    def get_by_id(self, contact_id: str) -> Contact | None:
        return self._by_id.get(contact_id)

    def list_active(self) -> list[Contact]:
        return [self._by_id[cid] for cid in self._order if cid in self._by_id]
