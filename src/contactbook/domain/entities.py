"""Value objects shared by the record variants: Gender, RecordKind and the per-variant payloads."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

NO_DATA = "[no data]"


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    ABSENT = ""

    @property
    def is_present(self) -> bool:
        return self is not Gender.ABSENT


class RecordKind(str, Enum):
    PERSON = "person"
    ORGANIZATION = "organization"


@dataclass
class PersonDetails:
    """Payload of an individual: surname, gender and optional birth date."""

    surname: str = ""
    gender: Gender = Gender.ABSENT
    birth_date: date | None = None


@dataclass
class OrganizationDetails:
    """Payload of an organization: a free-form postal address."""

    address: str = ""
