"""Display formatting for contact phone numbers.

Stored phones stay exactly as typed (trimmed); uniqueness compares that text. These helpers
only derive presentation forms and return None for anything phonenumbers cannot validate.
"""

import phonenumbers
from phonenumbers import PhoneNumber, PhoneNumberFormat


def _parse(raw: str | None, default_region: str | None) -> PhoneNumber | None:
    text = (raw or "").strip()
    if not text:
        return None
    try:
        parsed = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        return None
    return parsed if phonenumbers.is_valid_number(parsed) else None


def normalize_phone(raw: str | None, default_region: str | None = None) -> str | None:
    """E.164 form ("+12025551234"), or None if the number is not valid.

    default_region applies only to numbers typed without a leading +.
    """
    parsed = _parse(raw, default_region)
    if parsed is None:
        return None
    return phonenumbers.format_number(parsed, PhoneNumberFormat.E164)


def format_international(raw: str | None, default_region: str | None = None) -> str | None:
    """Human-readable international form ("+1 202-555-1234") for cards and detail views."""
    parsed = _parse(raw, default_region)
    if parsed is None:
        return None
    return phonenumbers.format_number(parsed, PhoneNumberFormat.INTERNATIONAL)
