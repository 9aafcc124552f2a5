"""Tests for field validators: phone grammar, gender and birth date."""

import logging
from datetime import date

import pytest

from contactbook.domain import (
    Gender,
    check_gender,
    check_phone_number,
    is_valid_phone_number,
    parse_birth_date,
)


@pytest.mark.parametrize(
    "number",
    [
        "+1 (555) 123-4567",
        "(123) 456-7890",
        "123-4567",
        "(123)456789",
        "123(456)789",
        "5551234",
        "555 1234",
        "+39 312 345 6789",
        "1-800-FLOWERS",
        "1 (23) 456",
        "+0 (123) 456-789",
    ],
)
def test_accepts_common_formats(number):
    assert is_valid_phone_number(number)


@pytest.mark.parametrize(
    "number",
    [
        "",
        "abc!@#",
        "123 4",
        "+1 2",
        "(123",
        "123)",
        "((12))",
        "123--456",
        "12.34.56",
        "123 456 7",
        "+1 (555) 123_4567",
        "phone: 123",
        "+",
        "-12",
        " 12",
        "+-12",
        "+ 12",
        "12 ",
        "12-",
        "1 (23",
        "(12) ",
    ],
)
def test_rejects_garbage_and_lone_characters(number):
    assert not is_valid_phone_number(number)


def test_check_phone_number_keeps_valid_and_empties_invalid():
    assert check_phone_number("123-4567") == "123-4567"
    assert check_phone_number("abc!@#") == ""
    assert check_phone_number("") == ""


def test_discarded_phone_number_is_not_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="contactbook.domain.validation")
    assert check_phone_number("call 555-SECRET!") == ""
    assert caplog.records
    assert "SECRET" not in caplog.text


def test_long_invalid_input_is_rejected_quickly():
    assert not is_valid_phone_number("1" * 5000 + "!")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("M", Gender.MALE),
        ("F", Gender.FEMALE),
        ("X", Gender.ABSENT),
        ("m", Gender.ABSENT),
        ("", Gender.ABSENT),
        ("MF", Gender.ABSENT),
    ],
)
def test_check_gender(raw, expected):
    assert check_gender(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1990-05-12", date(1990, 5, 12)),
        ("2000-02-29", date(2000, 2, 29)),
        ("2001-02-29", None),
        ("2000-02-30", None),
        ("not-a-date", None),
        ("", None),
        ("1990-5-12", None),
        ("19900512", None),
        ("1990-05-12T10:00", None),
    ],
)
def test_parse_birth_date(raw, expected):
    assert parse_birth_date(raw) == expected
