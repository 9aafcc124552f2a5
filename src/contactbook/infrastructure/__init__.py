"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import InMemoryContactRepository
from contactbook.infrastructure.phone import normalize_phone, phone_lookup_key

__all__ = [
    "InMemoryContactRepository",
    "normalize_phone",
    "phone_lookup_key",
]
