"""Contact record: a shared header (name, phone, timestamps) plus a Person or Organization payload."""

import logging
from dataclasses import FrozenInstanceError, dataclass, field
from datetime import date, datetime

from contactbook.domain import rendering
from contactbook.domain.entities import (
    Gender,
    OrganizationDetails,
    PersonDetails,
    RecordKind,
)
from contactbook.domain.validation import (
    check_gender,
    check_phone_number,
    parse_birth_date,
)

logger = logging.getLogger(__name__)

# Settable on every record in addition to editable_fields().
UNIVERSAL_FIELDS = ("name", "number")

_PERSON_FIELDS = ("surname", "birth", "gender")
_ORGANIZATION_FIELDS = ("address",)


def _now() -> datetime:
    return datetime.now()


@dataclass
class Record:
    """
    A single contact entry, either a person or an organization.
    Build one with Record.person() or Record.organization(); bad phone,
    gender or birth date input is stored as the absent value.
    created_at is fixed once constructed; a persistence layer restoring a
    record passes the saved created_at and last_edit to the constructor.
    """

    name: str
    phone_number: str
    details: PersonDetails | OrganizationDetails
    created_at: datetime = field(default_factory=lambda: _now(), compare=False)
    last_edit: datetime | None = field(default=None, compare=False)

    def __post_init__(self):
        self.phone_number = check_phone_number(self.phone_number)
        if self.last_edit is None or self.last_edit < self.created_at:
            self.last_edit = self.created_at

    def __setattr__(self, name, value):
        if name == "created_at" and "created_at" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'created_at'")
        super().__setattr__(name, value)

    @classmethod
    def person(
        cls,
        name: str,
        phone_number: str,
        surname: str,
        gender: str | Gender,
        birth_date: str | date | None,
    ) -> "Record":
        if isinstance(gender, Gender):
            gender_value = gender
        else:
            gender_value = check_gender(gender or "")
        if isinstance(birth_date, date):
            birth_value = birth_date
        else:
            birth_value = parse_birth_date(birth_date or "")
        return cls(
            name=name,
            phone_number=phone_number,
            details=PersonDetails(
                surname=surname, gender=gender_value, birth_date=birth_value
            ),
        )

    @classmethod
    def organization(cls, name: str, address: str, phone_number: str) -> "Record":
        return cls(
            name=name,
            phone_number=phone_number,
            details=OrganizationDetails(address=address),
        )

    @property
    def kind(self) -> RecordKind:
        if isinstance(self.details, PersonDetails):
            return RecordKind.PERSON
        return RecordKind.ORGANIZATION

    def editable_fields(self) -> list[str]:
        """Variant-specific field names accepted by set_field, in prompt order."""
        if self.kind is RecordKind.PERSON:
            return list(_PERSON_FIELDS)
        return list(_ORGANIZATION_FIELDS)

    def accepts_field(self, field_name: str) -> bool:
        return field_name in UNIVERSAL_FIELDS or field_name in self.editable_fields()

    def has_number(self) -> bool:
        return self.phone_number != ""

    def set_name(self, name: str) -> None:
        self.name = name
        self._touch()

    def set_phone_number(self, phone_number: str) -> None:
        self.phone_number = check_phone_number(phone_number)
        self._touch()

    def set_field(self, field_name: str, value: str) -> None:
        """Update one field by name. Unknown names are ignored."""
        if field_name == "name":
            self.set_name(value)
            return
        if field_name == "number":
            self.set_phone_number(value)
            return

        details = self.details
        if isinstance(details, PersonDetails):
            if field_name == "surname":
                details.surname = value
            elif field_name == "birth":
                details.birth_date = parse_birth_date(value)
            elif field_name == "gender":
                details.gender = check_gender(value[:1])
            else:
                logger.debug("Ignoring unknown person field %r", field_name)
                return
        else:
            if field_name == "address":
                details.address = value
            else:
                logger.debug("Ignoring unknown organization field %r", field_name)
                return
        self._touch()

    def list_label(self) -> str:
        return rendering.list_label(self)

    def visualize(self) -> str:
        return rendering.visualize(self)

    def normalized(self) -> str:
        return rendering.normalized(self)

    def _touch(self) -> None:
        # Wall clock may step backwards; last_edit never precedes created_at.
        self.last_edit = max(_now(), self.created_at)
