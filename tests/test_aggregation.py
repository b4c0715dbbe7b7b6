from gradebook.core import aggregation
from gradebook.core.entities import Evaluation


def _grades(*grades):
    return [Evaluation(exam_date="01.01.2024", exam_grade=g) for g in grades]


def test_average_grade():
    assert aggregation.average_grade(_grades(1, 2)) == 1.5
    assert aggregation.average_grade([]) is None


def test_rounded_average_two_places():
    assert aggregation.rounded_average(_grades(1, 2, 2)) == 1.67
    assert aggregation.rounded_average(_grades(2)) == 2.0
    assert aggregation.rounded_average([]) is None


def test_rounding_midpoints_go_to_even():
    assert aggregation.round_grade(1.125) == 1.12
    assert aggregation.round_grade(1.375) == 1.38


def test_rough_average_covers_every_evaluation_given(populated):
    # 2 + 1 + 4 + 3 + 5 over five exams, regardless of year group or course
    assert aggregation.rough_average(populated['evaluations']) == 3.0
    assert aggregation.rough_average([]) is None


def test_group_by_student_omits_students_without_evaluations(populated):
    y4a, _ = populated['year_groups']
    mat, _ = populated['courses']
    max_, erika, john = populated['students']
    groups = aggregation.group_by_student(y4a, mat, populated['referent'].students, populated['evaluations'])
    assert [g.subject for g in groups] == [max_, erika]
    assert groups[0].average == 1.5
    assert groups[1].average == 4.0
    assert len(groups[0].evaluations) == 2


def test_group_by_course(populated):
    y4a, _ = populated['year_groups']
    mat, eng = populated['courses']
    max_, _, john = populated['students']
    groups = aggregation.group_by_course(y4a, max_, populated['referent'].courses, populated['evaluations'])
    assert [(g.subject, g.average) for g in groups] == [(mat, 1.5), (eng, 3.0)]
    assert aggregation.group_by_course(y4a, john, populated['referent'].courses,
                                       populated['evaluations']) == []


def test_rounding_uses_the_binary_value():
    # 107 / 40 is stored just below 2.675
    assert aggregation.round_grade(107 / 40) == 2.67
    assert aggregation.rounded_average(_grades(3, 3, 3, 2, 2, 3, 3, 3), digits=1) == 2.8
