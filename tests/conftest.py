import pytest

from gradebook.config import AppConfig
from gradebook.core.entities import Course, Evaluation, Referent, Student, YearGroup
from gradebook.services import ApplicationContext, CreationService, ReportService


@pytest.fixture
def config():
    return AppConfig(current_year=2024, random_seed=7)


@pytest.fixture
def referent():
    return Referent("12345", "Ann", "Lee", "pass", "a@b.com", "12345")


@pytest.fixture
def populated(referent):
    """A referent with two year groups, two courses, three students and five exams."""
    y4a = YearGroup(2023, "4A")
    y4b = YearGroup(2023, "4B")
    mat = Course("MAT", "Mathematics")
    eng = Course("ENG", "English")
    max_ = Student("1234567890", "Max", "Mustermann", y4a)
    erika = Student("1234567891", "Erika", "Musterfrau", y4a)
    john = Student("1234567892", "John", "Doe", y4b)
    for y in (y4a, y4b):
        referent.add_year_group(y)
    for c in (mat, eng):
        referent.add_course(c)
    for s in (max_, erika, john):
        referent.add_student(s)
    evaluations = [
        Evaluation(referent, y4a, max_, mat, "Algebra", "15.03.2024", 2),
        Evaluation(referent, y4a, max_, mat, "Geometry", "01.01.2023", 1),
        Evaluation(referent, y4a, erika, mat, "Algebra", "20.12.2023", 4),
        Evaluation(referent, y4a, max_, eng, "Essay", "10.01.2024", 3),
        Evaluation(referent, y4b, john, eng, "Essay", "10.01.2024", 5),
    ]
    for e in evaluations:
        referent.add_evaluation(e)
    return {
        'referent': referent,
        'year_groups': (y4a, y4b),
        'courses': (mat, eng),
        'students': (max_, erika, john),
        'evaluations': evaluations,
    }


@pytest.fixture
def context(config):
    return ApplicationContext(config)


@pytest.fixture
def creation(config):
    return CreationService(config)


@pytest.fixture
def reports(config):
    return ReportService(config)
