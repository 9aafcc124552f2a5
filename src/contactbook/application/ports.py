"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Record


class ContactRepository(Protocol):
    """Owns contact records and hands out stable ids for them."""

    def add(self, record: Record) -> str:
        """Store a record and return its new id."""
        ...

    def get_by_id(self, record_id: str) -> Record | None:
        """Return the record with the given id, or None."""
        ...

    def list_all(self) -> list[tuple[str, Record]]:
        """Return (id, record) pairs in insertion order."""
        ...

    def remove(self, record_id: str) -> bool:
        """Drop a record. Returns True if removed, False if not found."""
        ...

    def count(self) -> int:
        ...
