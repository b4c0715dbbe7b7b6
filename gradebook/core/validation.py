"""
Field validation rules.

Every rule is a pure function of the candidate value and returns a
FieldResult: success carries the value to commit, failure carries the field
name and a human-readable message. Entity setters delegate to these rules.
"""

import re
from datetime import date, datetime
from typing import Optional, Union

from .enums import (
    REFERENT_ID_LENGTH, REFERENT_ID_MIN, REFERENT_ID_MAX, PASSWORD_MIN_LENGTH,
    MIN_YEAR, DESCRIPTION_MIN_LENGTH, ABBREVIATION_MIN_LENGTH, ABBREVIATION_MAX_LENGTH,
    MATRICULATION_NUMBER_LENGTH, GRADE_MIN, GRADE_MAX, INT64_MIN, INT64_MAX, DATE_FORMAT,
)
from .results import FieldResult

_DIGITS = re.compile(r"[0-9]+")
_SIGNED_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: Union[str, int]) -> Optional[int]:
    """Parse an integer the way a strict integer parse does; None when impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _SIGNED_INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    return None


def _require_non_empty(value: str, field: str, label: str) -> FieldResult:
    if len(value) > 0:
        return FieldResult.ok(field, value)
    return FieldResult.fail(field, f"The {label} cannot be empty!")


def _require_min_length(value: str, field: str, minimum: int, message: str) -> FieldResult:
    if len(value) >= minimum:
        return FieldResult.ok(field, value)
    return FieldResult.fail(field, message)


# Referent

def validate_referent_id(value: str) -> FieldResult:
    if len(value) != REFERENT_ID_LENGTH:
        return FieldResult.fail("id", f"Length of the ID must be {REFERENT_ID_LENGTH}!")
    if not _DIGITS.fullmatch(value):
        return FieldResult.fail("id", "ID must contain only digits!")
    if not REFERENT_ID_MIN <= int(value) <= REFERENT_ID_MAX:
        return FieldResult.fail("id", f"ID must be between {REFERENT_ID_MIN} and {REFERENT_ID_MAX}!")
    return FieldResult.ok("id", value)


def validate_first_name(value: str) -> FieldResult:
    return _require_non_empty(value, "first_name", "first name")


def validate_last_name(value: str) -> FieldResult:
    return _require_non_empty(value, "last_name", "last name")


def validate_password(value: str) -> FieldResult:
    return _require_min_length(
        value, "password", PASSWORD_MIN_LENGTH,
        f"Password must contain at least {PASSWORD_MIN_LENGTH} characters!",
    )


def is_valid_email(value: str) -> bool:
    """An address needs an "@" and a "." somewhere after the first "@"."""
    if "@" not in value:
        return False
    return "." in value.split("@")[1]


def validate_email(value: str) -> FieldResult:
    if is_valid_email(value):
        return FieldResult.ok("email", value)
    return FieldResult.fail("email", "E-Mail doesn't have a valid format!")


def validate_phone(value: str) -> FieldResult:
    if _SIGNED_INTEGER.fullmatch(value) and INT64_MIN <= int(value) <= INT64_MAX:
        return FieldResult.ok("phone", value)
    return FieldResult.fail("phone", "Phone number can only contain digits!")


# YearGroup

def validate_year(value: Union[str, int], current_year: Optional[int] = None) -> FieldResult:
    """Accept a year between 1950 and next year (relative to ``current_year``)."""
    year = _parse_int(value)
    if year is None:
        return FieldResult.fail("year", "The year must be a valid number!")
    if current_year is None:
        current_year = date.today().year
    if MIN_YEAR <= year <= current_year + 1:
        return FieldResult.ok("year", year)
    return FieldResult.fail("year", f"The year must be between {MIN_YEAR} and {current_year + 1}!")


def validate_description(value: str) -> FieldResult:
    return _require_min_length(
        value, "description", DESCRIPTION_MIN_LENGTH,
        "The description must have at least two characters!",
    )


# Course

def validate_abbreviation(value: str) -> FieldResult:
    if ABBREVIATION_MIN_LENGTH <= len(value) <= ABBREVIATION_MAX_LENGTH:
        return FieldResult.ok("abbreviation", value)
    return FieldResult.fail(
        "abbreviation",
        f"The abbreviation must contain {ABBREVIATION_MIN_LENGTH} to {ABBREVIATION_MAX_LENGTH} letters!",
    )


# Student

def validate_matriculation_number(value: str) -> FieldResult:
    if len(value) != MATRICULATION_NUMBER_LENGTH:
        return FieldResult.fail(
            "matriculation_number",
            f"Length of the matriculation number must be {MATRICULATION_NUMBER_LENGTH}!",
        )
    if not _DIGITS.fullmatch(value):
        return FieldResult.fail("matriculation_number", "Matriculation number must contain only digits!")
    return FieldResult.ok("matriculation_number", value)


# Evaluation

def parse_date(value: str) -> date:
    """Parse a ``DD.MM.YYYY`` string; raises ValueError for anything else."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def is_valid_date_format(value: str) -> bool:
    """
    Check for a strict ``DD.MM.YYYY`` date.

    The string must split on "." into exactly three digit groups of lengths
    2, 2 and 4 and must name a real calendar day (29.02 only in leap years).
    """
    parts = value.split(".")
    if len(parts) != 3 or [len(p) for p in parts] != [2, 2, 4]:
        return False
    if not all(_DIGITS.fullmatch(p) for p in parts):
        return False
    try:
        parse_date(value)
    except ValueError:
        return False
    return True


def validate_exam_description(value: str) -> FieldResult:
    return _require_min_length(
        value, "exam_description", DESCRIPTION_MIN_LENGTH,
        "The exam description must contain at least 2 letters!",
    )


def validate_exam_date(value: str) -> FieldResult:
    if is_valid_date_format(value):
        return FieldResult.ok("exam_date", value)
    return FieldResult.fail("exam_date", "The date must have the format DD.MM.YYYY!")


def validate_exam_grade(value: Union[str, int]) -> FieldResult:
    grade = _parse_int(value)
    if grade is not None and GRADE_MIN <= grade <= GRADE_MAX:
        return FieldResult.ok("exam_grade", grade)
    return FieldResult.fail("exam_grade", f"The exam grade must be a number between {GRADE_MIN} and {GRADE_MAX}!")
