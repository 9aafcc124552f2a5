"""Result types returned by ContactBook. Core has no UI dependency."""

from dataclasses import dataclass

from contactbook.domain import RecordKind


@dataclass(frozen=True)
class RecordSummary:
    """One record as returned by list_records, search and find_by_number."""

    record_id: str
    label: str
    kind: RecordKind
    has_number: bool


# --- add_person / add_organization results ---


@dataclass(frozen=True)
class RecordAdded:
    """Record was created and stored."""

    record_id: str
    label: str


# --- edit_record / remove_record results ---


@dataclass(frozen=True)
class FieldUpdated:
    """Field was set. The stored value may be empty if the input was invalid."""

    record_id: str
    field: str


@dataclass(frozen=True)
class UnknownField:
    """The record kind has no field with this name; nothing changed."""

    record_id: str
    field: str
    allowed: tuple[str, ...]


@dataclass(frozen=True)
class RecordRemoved:
    record_id: str
    label: str


@dataclass(frozen=True)
class RecordNotFound:
    """No record for the given id (wrong id or already removed)."""

    record_id: str
