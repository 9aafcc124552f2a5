"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactBook
from contactbook.application.dto import (
    FieldUpdated,
    RecordAdded,
    RecordNotFound,
    RecordRemoved,
    RecordSummary,
    UnknownField,
)
from contactbook.application.ports import ContactRepository

__all__ = [
    "ContactBook",
    "ContactRepository",
    "FieldUpdated",
    "RecordAdded",
    "RecordNotFound",
    "RecordRemoved",
    "RecordSummary",
    "UnknownField",
]
