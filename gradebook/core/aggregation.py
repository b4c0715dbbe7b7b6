"""
Grade aggregation used by the reports.
"""

from typing import TYPE_CHECKING, Iterable, List, NamedTuple, Optional, Sequence

from .queries import filter_evaluations

if TYPE_CHECKING:
    from .entities import Course, Evaluation, KeyedEntity, Student, YearGroup


class GradeGroup(NamedTuple):
    """Evaluations of one student (or course) and their rounded average."""
    subject: "KeyedEntity"
    evaluations: List["Evaluation"]
    average: float


def average_grade(evaluations: Iterable["Evaluation"]) -> Optional[float]:
    """Unrounded mean of the exam grades, None when there are none."""
    grades = [e.exam_grade for e in evaluations]
    if not grades:
        return None
    return sum(grades) / len(grades)


def round_grade(value: float, digits: int = 2) -> float:
    """Round half to even on the binary value, e.g. 1.125 -> 1.12 and 2.675 -> 2.67."""
    return round(value, digits)


def rounded_average(evaluations: Iterable["Evaluation"], digits: int = 2) -> Optional[float]:
    average = average_grade(evaluations)
    if average is None:
        return None
    return round_grade(average, digits)


def rough_average(evaluations: Sequence["Evaluation"]) -> Optional[float]:
    """
    Referent-wide average shown in the analysis header.

    Sums every grade passed in and divides by the size of that same set. The
    analysis report passes ALL of the referent's evaluations, so the figure
    is not restricted to the selected year group and course.
    """
    if len(evaluations) == 0:
        return None
    total = 0
    for evaluation in evaluations:
        total += evaluation.exam_grade
    return total / len(evaluations)


def group_by_student(year_group: "YearGroup", course: "Course", students: Iterable["Student"],
                     evaluations: Sequence["Evaluation"], digits: int = 2) -> List[GradeGroup]:
    """One group per student that has evaluations for the year group and course."""
    groups = []
    for student in students:
        matched = filter_evaluations(year_group, course, student, evaluations)
        if matched:
            groups.append(GradeGroup(student, matched, rounded_average(matched, digits)))
    return groups


def group_by_course(year_group: "YearGroup", student: "Student", courses: Iterable["Course"],
                    evaluations: Sequence["Evaluation"], digits: int = 2) -> List[GradeGroup]:
    """One group per course in which the student has evaluations for the year group."""
    groups = []
    for course in courses:
        matched = filter_evaluations(year_group, course, student, evaluations)
        if matched:
            groups.append(GradeGroup(course, matched, rounded_average(matched, digits)))
    return groups
