"""Domain entity: Contact."""

import uuid
from dataclasses import dataclass, field, replace
from datetime import date


def new_contact_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Contact:
    """
    A person in the user's directory.
    The id is assigned once and never changes; edits produce a new Contact with the same id.
    Optional fields are None when absent, never an empty string.
    """

    id: str = field(default_factory=new_contact_id)
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str | None = None
    address: str | None = None
    birthday: date | None = None
    is_favorite: bool = False

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError("Contact id must be non-empty.")
        for name in ("location", "address"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, value.strip() or None)

    @property
    def phone_key(self) -> str:
        """Trimmed phone, the value compared for uniqueness."""
        return (self.phone or "").strip()

    def with_favorite(self, is_favorite: bool) -> "Contact":
        return replace(self, is_favorite=is_favorite)
