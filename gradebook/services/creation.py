"""
Creation use-cases: apply raw field values to draft entities and save them.

Applying fields is first-failure-wins: fields are set in the order a creator
form lists them, the first failing field stops the run and is the only one
reported. Fields applied before it stay committed, later ones are untouched.
"""

import logging
from typing import Callable, Iterable, Optional, Union

from ..config import AppConfig
from ..core.entities import Course, Evaluation, Referent, Student, YearGroup
from ..core.enums import EntityType
from ..core.exceptions import DuplicateEntityError, ValidationError
from ..core.queries import (
    filter_students_by_year_group, find_course, find_referent, find_student, find_year_group,
)
from ..core.results import ApplyResult, FieldResult

logger = logging.getLogger(__name__)

FieldStep = Callable[[], FieldResult]


def apply_fields(steps: Iterable[FieldStep]) -> ApplyResult:
    """Run setter steps in order and stop at the first failure."""
    for index, step in enumerate(steps):
        result = step()
        if not result.success:
            return ApplyResult(False, result, index)
    return ApplyResult(True)


class CreationService:
    """Fills draft entities from raw input and saves them for their owner."""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()
        self._saved = 0
        self._rejected = 0

    # Apply

    def apply_referent_fields(self, referent: Referent, referent_id: str, first_name: str,
                              last_name: str, password: str, email: str, phone: str) -> ApplyResult:
        return apply_fields([
            lambda: referent.set_id(referent_id),
            lambda: referent.set_first_name(first_name),
            lambda: referent.set_last_name(last_name),
            lambda: referent.set_password(password),
            lambda: referent.set_email(email),
            lambda: referent.set_phone(phone),
        ])

    def apply_year_group_fields(self, year_group: YearGroup, year: Union[str, int],
                                description: str) -> ApplyResult:
        return apply_fields([
            lambda: year_group.set_year(year, self._config.current_year),
            lambda: year_group.set_description(description),
        ])

    def apply_course_fields(self, course: Course, abbreviation: str, description: str) -> ApplyResult:
        return apply_fields([
            lambda: course.set_abbreviation(abbreviation),
            lambda: course.set_description(description),
        ])

    def apply_student_fields(self, student: Student, owner: Referent, matriculation_number: str,
                             first_name: str, last_name: str, year_identifier: str) -> ApplyResult:
        """The year group is resolved against the owner's year groups."""
        return apply_fields([
            lambda: student.set_matriculation_number(matriculation_number),
            lambda: student.set_first_name(first_name),
            lambda: student.set_last_name(last_name),
            lambda: student.set_year_by_identifier(year_identifier, owner.year_groups),
        ])

    def apply_evaluation_fields(self, evaluation: Evaluation, owner: Referent,
                                referents: Iterable[Referent], referent_id: str,
                                year_identifier: str, matriculation_number: str,
                                abbreviation: str, exam_description: str, exam_date: str,
                                exam_grade: Union[str, int]) -> ApplyResult:
        """
        Resolve the four references, then apply description, date and grade.

        The referent is looked up among all registered ``referents``; year
        group and course among the collections owned by ``owner``. The student
        must belong to the resolved year group.
        """
        referents = list(referents)
        return apply_fields([
            lambda: evaluation.set_referent(find_referent(referent_id, referents)),
            lambda: evaluation.set_year_group(find_year_group(year_identifier, owner.year_groups)),
            lambda: evaluation.set_student(find_student(
                matriculation_number, filter_students_by_year_group(evaluation.year_group, owner.students))),
            lambda: evaluation.set_course(find_course(abbreviation, owner.courses)),
            lambda: evaluation.set_exam_description(exam_description),
            lambda: evaluation.set_exam_date(exam_date),
            lambda: evaluation.set_exam_grade(exam_grade),
        ])

    # Save

    def _reject_duplicate(self, kind: EntityType, key: str, owner: Referent) -> None:
        self._rejected += 1
        label = kind.value.replace("_", " ")
        logger.info("Rejected duplicate %s %r for referent %s", label, key, owner.id)
        raise DuplicateEntityError(
            f"This referent already created a {label} with the same key {key!r}!",
            error_code="duplicate_entity",
            details={'entity': kind.value, 'key': key, 'referent': owner.id},
        )

    def save_year_group(self, owner: Referent, year_group: YearGroup) -> YearGroup:
        if not owner.add_year_group(year_group):
            self._reject_duplicate(EntityType.YEAR_GROUP, year_group.identifier, owner)
        self._saved += 1
        logger.info("Saved year group %s for referent %s", year_group.identifier, owner.id)
        return year_group

    def save_course(self, owner: Referent, course: Course) -> Course:
        if not owner.add_course(course):
            self._reject_duplicate(EntityType.COURSE, course.abbreviation, owner)
        self._saved += 1
        logger.info("Saved course %s for referent %s", course.abbreviation, owner.id)
        return course

    def save_student(self, owner: Referent, student: Student) -> Student:
        if not owner.add_student(student):
            self._reject_duplicate(EntityType.STUDENT, student.matriculation_number, owner)
        self._saved += 1
        logger.info("Saved student %s for referent %s", student.matriculation_number, owner.id)
        return student

    def save_evaluation(self, owner: Referent, evaluation: Evaluation) -> Evaluation:
        if not evaluation.is_resolved:
            raise ValidationError(
                "Referent, year group, student and course must be selected!",
                field="evaluation", error_code="unresolved_reference",
            )
        owner.add_evaluation(evaluation)
        self._saved += 1
        logger.info("Saved evaluation %r for referent %s", evaluation, owner.id)
        return evaluation

    def get_statistics(self) -> dict:
        """Get creation statistics."""
        return {
            'saved': self._saved,
            'rejected_duplicates': self._rejected,
        }
