import pytest

from gradebook.core import validation
from gradebook.core.exceptions import ValidationError


@pytest.mark.parametrize("value", ["10000", "12345", "99999"])
def test_referent_id_accepts_five_digit_ids(value):
    result = validation.validate_referent_id(value)
    assert result.success
    assert result.value == value


@pytest.mark.parametrize("value", ["", "1234", "123456", "09999", "1234a", "+1234", " 1234"])
def test_referent_id_rejects_other_formats(value):
    result = validation.validate_referent_id(value)
    assert not result.success
    assert result.field == "id"
    assert result.message


def test_is_valid_date_format():
    assert validation.is_valid_date_format("29.02.2024")
    assert not validation.is_valid_date_format("29.02.2023")
    assert not validation.is_valid_date_format("31.04.2023")
    assert not validation.is_valid_date_format("1.1.2024")
    assert not validation.is_valid_date_format("01.01.24")
    assert not validation.is_valid_date_format("2024.01.01")
    assert not validation.is_valid_date_format("01-01-2024")
    assert not validation.is_valid_date_format(" 1.01.2024")
    assert not validation.is_valid_date_format("01.01.2024.")


def test_email_requires_dot_after_at():
    assert validation.validate_email("a@b.com").success
    assert not validation.validate_email("a.b@com").success
    assert not validation.validate_email("ab.com").success


def test_email_domain_is_read_up_to_the_second_at():
    assert not validation.validate_email("a@b@c.com").success
    assert validation.validate_email("a@b.c@d").success


def test_phone_must_parse_as_64_bit_integer():
    assert validation.validate_phone("066412345").success
    assert validation.validate_phone("9223372036854775807").success
    assert not validation.validate_phone("9223372036854775808").success
    assert not validation.validate_phone("0664 12345").success
    assert not validation.validate_phone("").success


def test_password_minimum_length():
    assert validation.validate_password("pass").success
    assert not validation.validate_password("abc").success


@pytest.mark.parametrize("value,ok", [("1950", True), ("1949", False), ("2025", True),
                                      ("2026", False), (2024, True), ("20x4", False)])
def test_year_range_relative_to_current_year(value, ok):
    assert validation.validate_year(value, current_year=2024).success is ok


def test_year_converts_strings_to_int():
    assert validation.validate_year("2023", current_year=2024).value == 2023


def test_matriculation_number_needs_ten_digits():
    assert validation.validate_matriculation_number("1234567890").success
    assert not validation.validate_matriculation_number("123456789").success
    assert not validation.validate_matriculation_number("123456789a").success


@pytest.mark.parametrize("value,ok", [("1", True), ("5", True), (3, True), ("0", False),
                                      ("6", False), ("two", False), ("", False)])
def test_exam_grade_range(value, ok):
    assert validation.validate_exam_grade(value).success is ok


def test_failure_converts_to_validation_error():
    result = validation.validate_abbreviation("A")
    with pytest.raises(ValidationError) as info:
        result.raise_for_failure()
    assert info.value.field == "abbreviation"
    assert info.value.details["field"] == "abbreviation"
