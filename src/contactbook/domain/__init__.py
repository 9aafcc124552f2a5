"""Domain layer: contact records, validators and renderings. No dependencies on outer layers."""

from contactbook.domain.entities import (
    NO_DATA,
    Gender,
    OrganizationDetails,
    PersonDetails,
    RecordKind,
)
from contactbook.domain.record import UNIVERSAL_FIELDS, Record
from contactbook.domain.validation import (
    check_gender,
    check_phone_number,
    is_valid_phone_number,
    parse_birth_date,
)

__all__ = [
    "NO_DATA",
    "UNIVERSAL_FIELDS",
    "Gender",
    "OrganizationDetails",
    "PersonDetails",
    "Record",
    "RecordKind",
    "check_gender",
    "check_phone_number",
    "is_valid_phone_number",
    "parse_birth_date",
]
