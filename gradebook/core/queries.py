"""
Stateless queries over entity collections.

Every function takes the collections it works on, never mutates them and
returns a new list (or a single entity / None for lookups).
"""

from datetime import date
from typing import TYPE_CHECKING, Iterable, List, Optional, TypeVar

from .exceptions import ContractViolationError
from .validation import parse_date

if TYPE_CHECKING:
    from .entities import Course, Evaluation, KeyedEntity, Referent, Student, YearGroup

K = TypeVar('K', bound='KeyedEntity')


def find_by_key(key: str, collection: Iterable[K]) -> Optional[K]:
    """Return the first entity whose natural key equals ``key``, else None."""
    for entity in collection:
        if entity.natural_key == key:
            return entity
    return None


def find_referent(referent_id: str, referents: Iterable["Referent"]) -> Optional["Referent"]:
    return find_by_key(referent_id, referents)


def find_year_group(identifier: str, year_groups: Iterable["YearGroup"]) -> Optional["YearGroup"]:
    return find_by_key(identifier, year_groups)


def find_student(matriculation_number: str, students: Iterable["Student"]) -> Optional["Student"]:
    return find_by_key(matriculation_number, students)


def find_course(abbreviation: str, courses: Iterable["Course"]) -> Optional["Course"]:
    return find_by_key(abbreviation, courses)


def filter_students_by_name(first_name: str, last_name: str,
                            students: Iterable["Student"]) -> List["Student"]:
    """
    Case-insensitive substring search on student names.

    An empty first name searches last names only and vice versa. With both
    given, a student matches when EITHER name matches.
    """
    first = first_name.upper()
    last = last_name.upper()
    result = []
    for student in students:
        if first == "":
            matches = last in student.last_name.upper()
        elif last == "":
            matches = first in student.first_name.upper()
        else:
            matches = first in student.first_name.upper() or last in student.last_name.upper()
        if matches:
            result.append(student)
    return result


def filter_students_by_year_group(year_group: "YearGroup",
                                  students: Iterable["Student"]) -> List["Student"]:
    return [s for s in students if s.year == year_group]


def filter_evaluations(year_group: "YearGroup", course: "Course", student: "Student",
                       evaluations: Iterable["Evaluation"]) -> List["Evaluation"]:
    """Evaluations matching year group AND course AND student."""
    return [
        e for e in evaluations
        if e.course == course and e.year_group == year_group and e.student == student
    ]


def exam_day(evaluation: "Evaluation") -> date:
    """The exam date of a saved evaluation as a calendar date."""
    try:
        return parse_date(evaluation.exam_date)
    except ValueError as e:
        raise ContractViolationError(
            f"Evaluation has no valid exam date: {evaluation.exam_date!r}",
            error_code="contract_violation",
        ) from e


def sort_by_date(evaluations: Iterable["Evaluation"]) -> List["Evaluation"]:
    """Stable ascending sort by calendar date."""
    return sorted(evaluations, key=exam_day)


def first_date(evaluations: Iterable["Evaluation"]) -> date:
    """Earliest exam date, or today for an empty collection."""
    ordered = sort_by_date(evaluations)
    if not ordered:
        return date.today()
    return exam_day(ordered[0])


def last_date(evaluations: Iterable["Evaluation"]) -> date:
    """Latest exam date, or today for an empty collection."""
    ordered = sort_by_date(evaluations)
    if not ordered:
        return date.today()
    return exam_day(ordered[-1])


def filter_by_date_range(first: date, last: date,
                         evaluations: Iterable["Evaluation"]) -> List["Evaluation"]:
    """Evaluations with ``first <= exam date <= last``, order preserved."""
    return [e for e in evaluations if first <= exam_day(e) <= last]
