"""Field validators. Invalid input is coerced to the field's absent value, never raised."""

import logging
import re
from datetime import date

from contactbook.domain.entities import Gender

logger = logging.getLogger(__name__)

_RUN = r"[A-Za-z0-9]+"
_LONG_RUN = r"[A-Za-z0-9]{2,}"
_SEP = r"[ -]"

# A group is a bare run or a balanced parenthesized run.
_GROUP = rf"(?:\({_RUN}\)|{_RUN})"
_LONG_GROUP = rf"(?:\({_LONG_RUN}\)|{_LONG_RUN})"

# e.g. "+1 (123) 456-7890", "(123) 456-7890", "123-4567". A first group is required.
_SPLIT_GROUPS = (
    rf"\+?(?:{_GROUP}(?:{_SEP}{_LONG_RUN})?|{_RUN}{_SEP}{_LONG_GROUP})"
    rf"(?:{_SEP}{_LONG_RUN})*"
)
# e.g. "(123)456789", "123(456)789", "5551234": no separators.
_ONE_GROUP = (
    rf"\+?(?:[A-Za-z0-9]{{3,}}|\({_RUN}\)[A-Za-z0-9]{{2,}}|{_RUN}\({_RUN}\){_RUN})"
)

_PHONE_RE = re.compile(rf"(?:{_SPLIT_GROUPS})|(?:{_ONE_GROUP})")
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_phone_number(text: str) -> bool:
    """Return True if the whole of text matches the phone grammar.

    The empty string is not a phone number.
    """
    if not text:
        return False
    return _PHONE_RE.fullmatch(text) is not None


def check_phone_number(text: str) -> str:
    """Return text if it is a valid phone number, else the empty string."""
    if is_valid_phone_number(text):
        return text
    if text:
        logger.debug("Discarding invalid phone number (%d chars)", len(text))
    return ""


def check_gender(text: str) -> Gender:
    """Map exactly "M" or "F" to a Gender; anything else is Gender.ABSENT."""
    if text == Gender.MALE.value:
        return Gender.MALE
    if text == Gender.FEMALE.value:
        return Gender.FEMALE
    if text:
        logger.debug("Discarding invalid gender value")
    return Gender.ABSENT


def parse_birth_date(text: str) -> date | None:
    """Parse an ISO-8601 YYYY-MM-DD calendar date, or return None."""
    if not text or _ISO_DATE_RE.fullmatch(text) is None:
        if text:
            logger.debug("Discarding malformed birth date")
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        logger.debug("Discarding impossible birth date")
        return None
