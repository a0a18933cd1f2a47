"""Derived view: filter by name, then favorites first, then name (case-insensitive)."""

from collections.abc import Iterable

from contactbook.domain import Contact


def matches(contact: Contact, search_text: str) -> bool:
    needle = search_text.strip()
    if not needle:
        return True
    return search_text.casefold() in contact.name.casefold()


def sort_key(contact: Contact) -> tuple[bool, str]:
    return (not contact.is_favorite, contact.name.casefold())


def derive(active_contacts: Iterable[Contact], search_text: str = "") -> list[Contact]:
    """Return the displayed sequence for the current state. Always a fresh list.

    sorted() is stable, so contacts with equal names keep their storage order.
    """
    return sorted(
        (c for c in active_contacts if matches(c, search_text or "")),
        key=sort_key,
    )
