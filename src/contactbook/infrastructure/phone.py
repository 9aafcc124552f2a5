"""E.164 keys for matching records that hold the same number under different spellings."""

import phonenumbers


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """E.164 form of a stored record number, or None when it has no such form.

    Record numbers are free-form ("+1 (555) 123-4567", "+1-800-FLOWERS"), so
    only length is checked (is_possible_number); fictional exchanges still
    normalize. Numbers without a leading + need default_region.
    """
    text = (raw or "").strip()
    if not text:
        return None
    try:
        parsed = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_possible_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def phone_lookup_key(raw: str, default_region: str | None = None) -> str:
    """Key under which two spellings of the same number compare equal.

    E.164 when the number parses, otherwise the text without spaces, lowercased.
    """
    return normalize_phone(raw, default_region) or raw.replace(" ", "").lower()
