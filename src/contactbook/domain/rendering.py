"""User-visible renderings of a record: list label, multi-line card and search key."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from contactbook.domain.entities import NO_DATA, OrganizationDetails, PersonDetails

if TYPE_CHECKING:
    from contactbook.domain.record import Record


def format_timestamp(moment: datetime) -> str:
    """Local-time ISO form truncated to the minute, e.g. 2024-05-01T10:15."""
    return moment.replace(second=0, microsecond=0).isoformat(timespec="minutes")


def list_label(record: Record) -> str:
    details = record.details
    if isinstance(details, PersonDetails):
        return f"{record.name} {details.surname}"
    return record.name


def visualize(record: Record) -> str:
    details = record.details
    if isinstance(details, PersonDetails):
        lines = [
            f"Name: {record.name}",
            f"Surname: {details.surname}",
            "Birth date: "
            + (details.birth_date.isoformat() if details.birth_date else NO_DATA),
            f"Gender: {details.gender.value if details.gender.is_present else NO_DATA}",
            f"Number: {record.phone_number if record.has_number() else NO_DATA}",
        ]
    elif isinstance(details, OrganizationDetails):
        lines = [
            f"Organization name: {record.name}",
            f"Address: {details.address}",
            f"Number: {record.phone_number}" if record.has_number() else NO_DATA,
        ]
    else:
        raise TypeError(f"Unsupported record details: {type(details).__name__}")
    lines.append(f"Time created: {format_timestamp(record.created_at)}")
    lines.append(f"Time last edit: {format_timestamp(record.last_edit)}")
    return "\n".join(lines)


def normalized(record: Record) -> str:
    """Fields concatenated in a fixed order, lowercased, ASCII spaces removed."""
    details = record.details
    if isinstance(details, PersonDetails):
        parts = [record.name, details.surname]
        if details.gender.is_present:
            parts.append(details.gender.value)
        if details.birth_date is not None:
            parts.append(details.birth_date.isoformat())
        parts.append(record.phone_number)
    else:
        parts = [record.name, details.address, record.phone_number]
    return normalize_text("".join(parts))


def normalize_text(text: str) -> str:
    return text.replace(" ", "").lower()
