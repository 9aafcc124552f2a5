"""In-memory implementation of ContactRepository (no file or DB)."""

import uuid

from contactbook.domain import Record


class InMemoryContactRepository:
    """Stores records in memory. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_id: dict[str, Record] = {}
        self._order: list[str] = []

    def add(self, record: Record) -> str:
        record_id = str(uuid.uuid4())
        self._by_id[record_id] = record
        self._order.append(record_id)
        return record_id

    def get_by_id(self, record_id: str) -> Record | None:
        return self._by_id.get(record_id)

    def list_all(self) -> list[tuple[str, Record]]:
        return [(rid, self._by_id[rid]) for rid in self._order if rid in self._by_id]

    def remove(self, record_id: str) -> bool:
        if self._by_id.pop(record_id, None) is None:
            return False
        self._order.remove(record_id)
        return True

    def count(self) -> int:
        return len(self._by_id)
