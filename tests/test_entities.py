import pytest

from gradebook.core.entities import Course, Evaluation, Referent, Student, YearGroup
from gradebook.core.exceptions import ContractViolationError


def test_set_id_stores_valid_id():
    referent = Referent()
    assert referent.set_id("54321").success
    assert referent.id == "54321"


@pytest.mark.parametrize("bad", ["5432", "5432x", "100000", "00001"])
def test_set_id_failure_leaves_id_unchanged(bad):
    referent = Referent()
    referent.set_id("54321")
    result = referent.set_id(bad)
    assert not result.success
    assert result.field == "id"
    assert referent.id == "54321"


def test_password_is_write_only():
    referent = Referent()
    result = referent.set_password("secret")
    assert result.success
    assert result.value is None
    assert referent.is_matching_password("secret")
    assert not referent.is_matching_password("other")
    assert not referent.set_password("abc").success
    assert referent.is_matching_password("secret")


def test_drafts_have_default_values():
    assert YearGroup().year == 2000
    assert YearGroup().description == ""
    assert Student().year is None
    evaluation = Evaluation()
    assert evaluation.exam_grade == 0
    assert not evaluation.is_resolved


def test_year_group_identifier_and_equality():
    a = YearGroup(2024, "4AHIF")
    b = YearGroup(2019, "4AHIF")
    assert a.identifier == "4AHIF"
    assert a == b
    assert hash(a) == hash(b)
    assert a != YearGroup(2024, "5AHIF")
    assert len({a, b}) == 1


def test_course_abbreviation_length():
    course = Course()
    assert not course.set_abbreviation("A").success
    assert not course.set_abbreviation("ABCDE").success
    assert course.abbreviation == ""
    assert course.set_abbreviation("AB").success
    assert course.set_abbreviation("ABCD").success
    assert course.abbreviation == "ABCD"


def test_entities_of_different_types_are_never_equal():
    assert Course("4A", "Something") != YearGroup(2020, "4A")


def test_student_equality_uses_matriculation_number():
    y = YearGroup(2023, "4A")
    assert Student("1234567890", "Max", "M", y) == Student("1234567890", "Other", "Name", None)
    assert Student("1234567890").full_name == " "
    assert Student("1", "Max", "Muster").full_name == "Max Muster"


def test_student_year_resolves_identifier():
    groups = [YearGroup(2023, "4A"), YearGroup(2023, "4B")]
    student = Student()
    assert student.set_year_by_identifier("4B", groups).success
    assert student.year is groups[1]
    result = student.set_year_by_identifier("5C", groups)
    assert not result.success
    assert result.field == "year"
    assert student.year is groups[1]


def test_student_year_with_wrong_collection_is_contract_violation():
    with pytest.raises(ContractViolationError):
        Student().set_year_by_identifier("4A", [Course("MAT", "Maths")])
    with pytest.raises(ContractViolationError):
        Student().set_year("4A")


def test_evaluation_setters(referent):
    evaluation = Evaluation()
    assert not evaluation.set_student(None).success
    assert evaluation.set_referent(referent).success
    assert evaluation.set_exam_date("10.01.2024").success
    assert not evaluation.set_exam_date("10.1.2024").success
    assert evaluation.exam_date == "10.01.2024"
    assert evaluation.set_exam_grade("2").success
    assert evaluation.exam_grade == 2
    assert not evaluation.set_exam_grade(6).success
    assert evaluation.exam_grade == 2
    with pytest.raises(ContractViolationError):
        evaluation.set_course(YearGroup(2023, "4A"))


def test_evaluations_compare_by_identity():
    a = Evaluation(exam_description="Test", exam_date="01.01.2024", exam_grade=1)
    b = Evaluation(exam_description="Test", exam_date="01.01.2024", exam_grade=1)
    assert a != b
    assert a == a


def test_referent_rejects_duplicate_owned_entities(referent):
    assert referent.add_course(Course("MAT", "Mathematics"))
    assert not referent.add_course(Course("MAT", "Maths again"))
    assert referent.add_year_group(YearGroup(2023, "4A"))
    assert not referent.add_year_group(YearGroup(2024, "4A"))
    assert referent.add_student(Student("1234567890"))
    assert not referent.add_student(Student("1234567890"))
    evaluation = Evaluation()
    assert referent.add_evaluation(evaluation)
    assert referent.add_evaluation(evaluation)
    assert len(referent.courses) == 1
    assert len(referent.evaluations) == 2


def test_owned_collections_are_copies(referent):
    referent.courses.append(Course("MAT", "Mathematics"))
    assert referent.courses == []


def test_to_dict(referent):
    y = YearGroup(2023, "4A")
    referent.add_year_group(y)
    data = referent.to_dict()
    assert data["id"] == "12345"
    assert data["year_groups"] == ["4A"]
    assert "password" not in data
    assert Student("1234567890", "Max", "M", y).to_dict()["year"] == "4A"
