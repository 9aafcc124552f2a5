"""
Contactbook core: clean-architecture layout.

- domain: Record (person or organization), validators, renderings. No outer dependencies.
- application: use cases (ContactBook), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository, E.164 phone keys).
"""

from functools import partial

from contactbook.application import (
    ContactBook,
    ContactRepository,
    FieldUpdated,
    RecordAdded,
    RecordNotFound,
    RecordRemoved,
    RecordSummary,
    UnknownField,
)
from contactbook.config import Settings, configure_logging, load_settings
from contactbook.domain import Gender, Record, RecordKind
from contactbook.infrastructure import InMemoryContactRepository, phone_lookup_key


def create_contact_book(settings: Settings | None = None) -> ContactBook:
    """Wire an in-memory ContactBook from settings (loaded from env if omitted)."""
    if settings is None:
        settings = load_settings()
    return ContactBook(
        InMemoryContactRepository(),
        phone_key=partial(phone_lookup_key, default_region=settings.default_region),
    )


__all__ = [
    "ContactBook",
    "ContactRepository",
    "FieldUpdated",
    "Gender",
    "InMemoryContactRepository",
    "Record",
    "RecordAdded",
    "RecordKind",
    "RecordNotFound",
    "RecordRemoved",
    "RecordSummary",
    "Settings",
    "UnknownField",
    "configure_logging",
    "create_contact_book",
    "load_settings",
]
