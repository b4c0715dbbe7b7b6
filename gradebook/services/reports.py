"""
Report use-cases for the analysis menu.

Reports return pydantic models holding entity references and rounded
numbers; rendering them is up to the caller.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..config import AppConfig
from ..core.aggregation import group_by_course, group_by_student, rough_average
from ..core.entities import Course, Evaluation, Referent, Student, YearGroup
from ..core.enums import ReportType
from ..core.exceptions import ResourceNotFoundError, ValidationError
from ..core.queries import (
    filter_by_date_range, find_course, find_student, find_year_group,
    first_date, last_date, sort_by_date,
)
from ..core.validation import format_date, is_valid_date_format, parse_date

logger = logging.getLogger(__name__)


class EvaluationLine(BaseModel):
    exam_date: str
    exam_description: str
    exam_grade: int = Field(..., ge=1, le=5)
    matriculation_number: str
    student_name: str

    @classmethod
    def from_evaluation(cls, evaluation: Evaluation) -> "EvaluationLine":
        return cls(
            exam_date=evaluation.exam_date,
            exam_description=evaluation.exam_description,
            exam_grade=evaluation.exam_grade,
            matriculation_number=evaluation.student.matriculation_number,
            student_name=evaluation.student.full_name,
        )


class StudentAnalysisRow(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    student: Student
    evaluations: List[EvaluationLine]
    average_grade: float


class AnalysisReport(BaseModel):
    """Students of a year group in one course, each with their evaluations."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    report_type: ReportType = ReportType.STUDENT_ANALYSIS
    course: Course
    year_group: YearGroup
    rough_average: Optional[float] = None
    rows: List[StudentAnalysisRow] = []


class CertificateRow(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    course: Course
    abbreviation: str
    description: str
    average_grade: float


class CertificateReport(BaseModel):
    """Average grade per course for one student in one year group."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    report_type: ReportType = ReportType.CERTIFICATE
    student: Student
    year_group: YearGroup
    rows: List[CertificateRow] = []


class PeriodReport(BaseModel):
    """All evaluations within a date range, oldest first."""
    report_type: ReportType = ReportType.PERIOD
    first_date: date
    last_date: date
    rows: List[EvaluationLine] = []


class ReportService:
    """Builds the analysis, certificate and period reports."""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()

    def analysis_report(self, referent: Referent, year_group: YearGroup, course: Course) -> AnalysisReport:
        evaluations = referent.evaluations
        groups = group_by_student(year_group, course, referent.students, evaluations,
                                  self._config.rounding_digits)
        rows = [
            StudentAnalysisRow(
                student=group.subject,
                evaluations=[EvaluationLine.from_evaluation(e) for e in group.evaluations],
                average_grade=group.average,
            )
            for group in groups
        ]
        logger.debug("Analysis %s/%s: %d students", year_group.identifier, course.abbreviation, len(rows))
        # The header average spans every evaluation of the referent.
        return AnalysisReport(
            course=course,
            year_group=year_group,
            rough_average=rough_average(evaluations),
            rows=rows,
        )

    def analysis_report_for(self, referent: Referent, year_identifier: str,
                            abbreviation: str) -> AnalysisReport:
        """Analysis report for a year group and course given by their keys."""
        year_group = self._require(find_year_group(year_identifier, referent.year_groups),
                                   "year group", year_identifier)
        course = self._require(find_course(abbreviation, referent.courses), "course", abbreviation)
        return self.analysis_report(referent, year_group, course)

    def certificate_report(self, referent: Referent, year_group: YearGroup,
                           student: Student) -> CertificateReport:
        groups = group_by_course(year_group, student, referent.courses, referent.evaluations,
                                 self._config.rounding_digits)
        rows = [
            CertificateRow(
                course=group.subject,
                abbreviation=group.subject.abbreviation,
                description=group.subject.description,
                average_grade=group.average,
            )
            for group in groups
        ]
        return CertificateReport(student=student, year_group=year_group, rows=rows)

    def certificate_report_for(self, referent: Referent, year_identifier: str,
                               matriculation_number: str) -> CertificateReport:
        year_group = self._require(find_year_group(year_identifier, referent.year_groups),
                                   "year group", year_identifier)
        student = self._require(find_student(matriculation_number, referent.students),
                                "student", matriculation_number)
        return self.certificate_report(referent, year_group, student)

    def default_period(self, referent: Referent) -> Tuple[str, str]:
        """Earliest and latest exam date, formatted to prefill the period form."""
        evaluations = referent.evaluations
        return format_date(first_date(evaluations)), format_date(last_date(evaluations))

    def validate_period(self, first_text: str, last_text: str,
                        evaluations: Sequence[Evaluation]) -> Tuple[date, date]:
        """
        Check a requested period against the recorded evaluations.

        Both dates must be valid ``DD.MM.YYYY`` dates, lie within the earliest
        and latest exam date, and the first must not be after the last.
        """
        if not is_valid_date_format(first_text):
            raise ValidationError("The date must have the format DD.MM.YYYY!", field="first_date")
        if not is_valid_date_format(last_text):
            raise ValidationError("The date must have the format DD.MM.YYYY!", field="last_date")

        first, last = parse_date(first_text), parse_date(last_text)
        minimum, maximum = first_date(evaluations), last_date(evaluations)
        if first < minimum or last > maximum:
            raise ValidationError(
                f"The date must be between {format_date(minimum)} and {format_date(maximum)}!",
                field="first_date" if first < minimum else "last_date",
                details={'minimum': format_date(minimum), 'maximum': format_date(maximum)},
            )
        if first > last:
            raise ValidationError("The first date cannot be later than the last date!", field="first_date")
        return first, last

    def period_report(self, referent: Referent, first_text: str, last_text: str) -> PeriodReport:
        evaluations = referent.evaluations
        first, last = self.validate_period(first_text, last_text, evaluations)
        selected = filter_by_date_range(first, last, sort_by_date(evaluations))
        return PeriodReport(
            first_date=first,
            last_date=last,
            rows=[EvaluationLine.from_evaluation(e) for e in selected],
        )

    @staticmethod
    def _require(entity, kind: str, key: str):
        if entity is None:
            raise ResourceNotFoundError(f"The {kind} {key!r} could not be found!",
                                        error_code="not_found",
                                        details={'entity': kind, 'key': key})
        return entity
