"""Domain layer: entities. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, new_contact_id

__all__ = ["Contact", "new_contact_id"]
