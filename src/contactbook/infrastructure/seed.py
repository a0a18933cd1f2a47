"""Load the initial contact list from a JSON or YAML file. Seed records are not validated."""

import json
from datetime import date
from pathlib import Path

import yaml

from contactbook.domain import Contact, new_contact_id


def _parse_date(value) -> date | None:
    if value is None or isinstance(value, date):
        return value
    text = str(value).strip()
    return date.fromisoformat(text) if text else None


def _text(value) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def contact_from_record(record: dict) -> Contact:
    """Map one seed mapping to a Contact. Accepts isFavorite or is_favorite, defaulting to False."""
    contact_id = _text(record.get("id")) or new_contact_id()
    is_favorite = record.get("isFavorite", record.get("is_favorite", False))
    return Contact(
        id=contact_id,
        name=_text(record.get("name")) or "",
        email=_text(record.get("email")) or "",
        phone=_text(record.get("phone")) or "",
        location=_text(record.get("location")),
        address=_text(record.get("address")),
        birthday=_parse_date(record.get("birthday")),
        is_favorite=bool(is_favorite),
    )


def load_seed_contacts(path: Path | str) -> list[Contact]:
    """Read a list of contact mappings (.json, or YAML for any other suffix)."""
    path = Path(path)
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        records = json.loads(raw)
    else:
        records = yaml.safe_load(raw)
    if records is None:
        return []
    if not isinstance(records, list):
        raise ValueError("Seed file must contain a list of contacts")
    contacts = []
    for record in records:
        if not isinstance(record, dict):
            raise ValueError("Every seed contact must be a mapping")
        contacts.append(contact_from_record(record))
    return contacts
