"""Contact book use cases: add, list, search, edit and remove records."""

import logging
from collections.abc import Callable

from contactbook.application.dto import (
    FieldUpdated,
    RecordAdded,
    RecordNotFound,
    RecordRemoved,
    RecordSummary,
    UnknownField,
)
from contactbook.application.ports import ContactRepository
from contactbook.domain import UNIVERSAL_FIELDS, Record
from contactbook.domain.rendering import normalize_text

logger = logging.getLogger(__name__)


def _summary(record_id: str, record: Record) -> RecordSummary:
    return RecordSummary(
        record_id=record_id,
        label=record.list_label(),
        kind=record.kind,
        has_number=record.has_number(),
    )


class ContactBook:
    """Front for a shell: every record operation goes through here by record id."""

    def __init__(
        self,
        repository: ContactRepository,
        *,
        phone_key: Callable[[str], str] | None = None,
    ) -> None:
        self._repo = repository
        self._phone_key = phone_key or normalize_text

    def add_person(
        self,
        name: str,
        phone_number: str,
        surname: str,
        gender: str,
        birth_date: str,
    ) -> RecordAdded:
        """Create a person. Invalid phone, gender or birth date are stored as absent."""
        record = Record.person(name, phone_number, surname, gender, birth_date)
        return self._store(record)

    def add_organization(
        self, name: str, address: str, phone_number: str
    ) -> RecordAdded:
        """Create an organization. An invalid phone is stored as absent."""
        record = Record.organization(name, address, phone_number)
        return self._store(record)

    def _store(self, record: Record) -> RecordAdded:
        record_id = self._repo.add(record)
        logger.info("Added %s record %s", record.kind.value, record_id)
        return RecordAdded(record_id=record_id, label=record.list_label())

    def count(self) -> int:
        return self._repo.count()

    def list_records(self) -> list[RecordSummary]:
        """Return all records in insertion order."""
        return [_summary(rid, record) for rid, record in self._repo.list_all()]

    def get_record(self, record_id: str) -> Record | None:
        return self._repo.get_by_id(record_id)

    def record_info(self, record_id: str) -> str | None:
        """Return the multi-line card for a record, or None if not found."""
        record = self._repo.get_by_id(record_id)
        if record is None:
            return None
        return record.visualize()

    def search(self, query: str) -> list[RecordSummary]:
        """Return records whose normalized text contains the query (case and space insensitive)."""
        needle = normalize_text(query or "")
        if not needle:
            return []
        return [
            _summary(rid, record)
            for rid, record in self._repo.list_all()
            if needle in record.normalized()
        ]

    def find_by_number(self, raw: str) -> list[RecordSummary]:
        """Return records holding the same phone number, however it is spelled."""
        raw = (raw or "").strip()
        if not raw:
            return []
        key = self._phone_key(raw)
        out = []
        for rid, record in self._repo.list_all():
            if not record.has_number():
                continue
            if self._phone_key(record.phone_number) == key:
                out.append(_summary(rid, record))
        return out

    def editable_fields(self, record_id: str) -> list[str] | None:
        """Field names a shell may offer for this record, or None if not found."""
        record = self._repo.get_by_id(record_id)
        if record is None:
            return None
        return [*UNIVERSAL_FIELDS, *record.editable_fields()]

    def edit_record(
        self, record_id: str, field: str, value: str
    ) -> FieldUpdated | UnknownField | RecordNotFound:
        record = self._repo.get_by_id(record_id)
        if record is None:
            return RecordNotFound(record_id=record_id)
        if not record.accepts_field(field):
            return UnknownField(
                record_id=record_id,
                field=field,
                allowed=(*UNIVERSAL_FIELDS, *record.editable_fields()),
            )
        record.set_field(field, value)
        logger.info("Updated field %r of record %s", field, record_id)
        return FieldUpdated(record_id=record_id, field=field)

    def remove_record(self, record_id: str) -> RecordRemoved | RecordNotFound:
        record = self._repo.get_by_id(record_id)
        if record is None or not self._repo.remove(record_id):
            return RecordNotFound(record_id=record_id)
        logger.info("Removed record %s", record_id)
        return RecordRemoved(record_id=record_id, label=record.list_label())
