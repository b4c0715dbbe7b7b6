"""
Core entities of the gradebook.

Entities start as drafts with default values and are filled field by field
through validating setters. A setter never raises for bad input; it returns a
FieldResult and leaves the field untouched on failure.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Union

from . import validation
from .exceptions import ContractViolationError
from .queries import find_by_key
from .results import FieldResult


def _commit(entity: "Entity", attribute: str, result: FieldResult) -> FieldResult:
    if result.success:
        setattr(entity, attribute, result.value)
    return result


class Entity(ABC):
    """Base class for all gradebook entities."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()})"


class KeyedEntity(Entity):
    """
    Entity compared by a single natural key.

    Hashing uses the same key, so membership tests in sets and lists agree.
    """

    @property
    @abstractmethod
    def natural_key(self) -> str:
        pass

    def __eq__(self, other: object) -> bool:
        if isinstance(other, self.__class__):
            return self.natural_key == other.natural_key
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.natural_key))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.natural_key!r})"


class YearGroup(KeyedEntity):
    """A cohort identified by its description."""

    def __init__(self, year: int = 2000, description: str = ""):
        self._year = year
        self._description = description

    @property
    def year(self) -> int:
        """Get the year."""
        return self._year

    @property
    def description(self) -> str:
        """Get the description."""
        return self._description

    @property
    def identifier(self) -> str:
        """Get the identifier used to select the year group."""
        return self._description

    @property
    def natural_key(self) -> str:
        """Get the key used for equality and hashing."""
        return self._description

    def set_year(self, year: Union[str, int], current_year: Optional[int] = None) -> FieldResult:
        """Set the year from a string or an int."""
        return _commit(self, "_year", validation.validate_year(year, current_year))

    def set_description(self, description: str) -> FieldResult:
        """Validate and set the description."""
        return _commit(self, "_description", validation.validate_description(description))

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {'year': self._year, 'description': self._description}


class Course(KeyedEntity):
    """A subject identified by its abbreviation."""

    def __init__(self, abbreviation: str = "", description: str = ""):
        self._abbreviation = abbreviation
        self._description = description

    @property
    def abbreviation(self) -> str:
        """Get the course abbreviation."""
        return self._abbreviation

    @property
    def description(self) -> str:
        """Get the description."""
        return self._description

    @property
    def natural_key(self) -> str:
        """Get the key used for equality and hashing."""
        return self._abbreviation

    def set_abbreviation(self, abbreviation: str) -> FieldResult:
        """Validate and set the abbreviation."""
        return _commit(self, "_abbreviation", validation.validate_abbreviation(abbreviation))

    def set_description(self, description: str) -> FieldResult:
        """Validate and set the description."""
        return _commit(self, "_description", validation.validate_description(description))

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {'abbreviation': self._abbreviation, 'description': self._description}


class Student(KeyedEntity):
    """A learner assigned to exactly one year group."""

    def __init__(self, matriculation_number: str = "", first_name: str = "",
                 last_name: str = "", year: Optional[YearGroup] = None):
        self._matriculation_number = matriculation_number
        self._first_name = first_name
        self._last_name = last_name
        self._year = year

    @property
    def matriculation_number(self) -> str:
        """Get the matriculation number."""
        return self._matriculation_number

    @property
    def first_name(self) -> str:
        """Get the first name."""
        return self._first_name

    @property
    def last_name(self) -> str:
        """Get the last name."""
        return self._last_name

    @property
    def full_name(self) -> str:
        """Get first and last name."""
        return f"{self._first_name} {self._last_name}"

    @property
    def year(self) -> Optional[YearGroup]:
        """Get the assigned year group."""
        return self._year

    @property
    def natural_key(self) -> str:
        """Get the key used for equality and hashing."""
        return self._matriculation_number

    def set_matriculation_number(self, matriculation_number: str) -> FieldResult:
        """Validate and set the matriculation number."""
        return _commit(self, "_matriculation_number",
                       validation.validate_matriculation_number(matriculation_number))

    def set_first_name(self, first_name: str) -> FieldResult:
        """Validate and set the first name."""
        return _commit(self, "_first_name", validation.validate_first_name(first_name))

    def set_last_name(self, last_name: str) -> FieldResult:
        """Validate and set the last name."""
        return _commit(self, "_last_name", validation.validate_last_name(last_name))

    def set_year(self, year_group: YearGroup) -> FieldResult:
        """Assign an already resolved year group."""
        if not isinstance(year_group, YearGroup):
            raise ContractViolationError(
                f"Expected a YearGroup, got {type(year_group).__name__}",
                error_code="contract_violation",
            )
        self._year = year_group
        return FieldResult.ok("year", year_group)

    def set_year_by_identifier(self, identifier: str, year_groups: Iterable[YearGroup]) -> FieldResult:
        """Resolve ``identifier`` against ``year_groups`` and assign the match."""
        year_groups = list(year_groups)
        if not all(isinstance(y, YearGroup) for y in year_groups):
            raise ContractViolationError(
                "Year groups must be resolved against a collection of YearGroup",
                error_code="contract_violation",
            )
        year_group = find_by_key(identifier, year_groups)
        if year_group is None:
            return FieldResult.fail("year", "The year group could not be found!")
        return self.set_year(year_group)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'matriculation_number': self._matriculation_number,
            'first_name': self._first_name,
            'last_name': self._last_name,
            'year': self._year.identifier if self._year else None,
        }


class Referent(KeyedEntity):
    """
    The school teacher using the application.

    A referent owns every year group, course, student and evaluation they
    create. The password is write-only; use ``is_matching_password``.
    """

    def __init__(self, referent_id: str = "", first_name: str = "", last_name: str = "",
                 password: str = "", email: str = "", phone: str = ""):
        self._id = referent_id
        self._first_name = first_name
        self._last_name = last_name
        self._password = password
        self._email = email
        self._phone = phone
        self._year_groups: List[YearGroup] = []
        self._courses: List[Course] = []
        self._students: List[Student] = []
        self._evaluations: List["Evaluation"] = []

    @property
    def id(self) -> str:
        """Get the referent ID."""
        return self._id

    @property
    def first_name(self) -> str:
        """Get the first name."""
        return self._first_name

    @property
    def last_name(self) -> str:
        """Get the last name."""
        return self._last_name

    @property
    def full_name(self) -> str:
        """Get first and last name."""
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> str:
        """Get the e-mail address."""
        return self._email

    @property
    def phone(self) -> str:
        """Get the phone number."""
        return self._phone

    @property
    def year_groups(self) -> List[YearGroup]:
        """Get a copy of the owned year groups."""
        return self._year_groups.copy()

    @property
    def courses(self) -> List[Course]:
        """Get a copy of the owned courses."""
        return self._courses.copy()

    @property
    def students(self) -> List[Student]:
        """Get a copy of the owned students."""
        return self._students.copy()

    @property
    def evaluations(self) -> List["Evaluation"]:
        """Get a copy of the recorded evaluations."""
        return self._evaluations.copy()

    @property
    def natural_key(self) -> str:
        """Get the key used for equality and hashing."""
        return self._id

    def is_matching_password(self, password: str) -> bool:
        """Check a password against the stored one."""
        return password == self._password

    def set_id(self, referent_id: str) -> FieldResult:
        """Validate and set the referent ID."""
        return _commit(self, "_id", validation.validate_referent_id(referent_id))

    def set_first_name(self, first_name: str) -> FieldResult:
        """Validate and set the first name."""
        return _commit(self, "_first_name", validation.validate_first_name(first_name))

    def set_last_name(self, last_name: str) -> FieldResult:
        """Validate and set the last name."""
        return _commit(self, "_last_name", validation.validate_last_name(last_name))

    def set_password(self, password: str) -> FieldResult:
        """Validate and set the password."""
        result = _commit(self, "_password", validation.validate_password(password))
        # Never hand the password back to callers.
        return FieldResult.ok("password", None) if result.success else result

    def set_email(self, email: str) -> FieldResult:
        """Validate and set the e-mail address."""
        return _commit(self, "_email", validation.validate_email(email))

    def set_phone(self, phone: str) -> FieldResult:
        """Validate and set the phone."""
        return _commit(self, "_phone", validation.validate_phone(phone))

    def add_year_group(self, year_group: YearGroup) -> bool:
        """Add a year group unless an equal one exists."""
        if year_group in self._year_groups:
            return False
        self._year_groups.append(year_group)
        return True

    def add_course(self, course: Course) -> bool:
        """Add a course unless an equal one exists."""
        if course in self._courses:
            return False
        self._courses.append(course)
        return True

    def add_student(self, student: Student) -> bool:
        """Add a student unless an equal one exists."""
        if student in self._students:
            return False
        self._students.append(student)
        return True

    def add_evaluation(self, evaluation: "Evaluation") -> bool:
        """Add an evaluation. Evaluations have no natural key, so this always succeeds."""
        self._evaluations.append(evaluation)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'first_name': self._first_name,
            'last_name': self._last_name,
            'email': self._email,
            'phone': self._phone,
            'year_groups': [y.identifier for y in self._year_groups],
            'courses': [c.abbreviation for c in self._courses],
            'students': [s.matriculation_number for s in self._students],
            'evaluations': len(self._evaluations),
        }


class Evaluation(Entity):
    """
    A single graded exam.

    Evaluations are compared by identity; two exams with identical data are
    still two records.
    """

    def __init__(self, referent: Optional[Referent] = None, year_group: Optional[YearGroup] = None,
                 student: Optional[Student] = None, course: Optional[Course] = None,
                 exam_description: str = "", exam_date: str = "", exam_grade: int = 0):
        self._referent = referent
        self._year_group = year_group
        self._student = student
        self._course = course
        self._exam_description = exam_description
        self._exam_date = exam_date
        self._exam_grade = exam_grade

    @property
    def referent(self) -> Optional[Referent]:
        """Get the referent."""
        return self._referent

    @property
    def year_group(self) -> Optional[YearGroup]:
        """Get the year group."""
        return self._year_group

    @property
    def student(self) -> Optional[Student]:
        """Get the student."""
        return self._student

    @property
    def course(self) -> Optional[Course]:
        """Get the course."""
        return self._course

    @property
    def exam_description(self) -> str:
        """Get the exam description."""
        return self._exam_description

    @property
    def exam_date(self) -> str:
        """Get the exam date (DD.MM.YYYY)."""
        return self._exam_date

    @property
    def exam_grade(self) -> int:
        """Get the exam grade."""
        return self._exam_grade

    @property
    def is_resolved(self) -> bool:
        """True once all four references are set."""
        return None not in (self._referent, self._year_group, self._student, self._course)

    def _set_reference(self, attribute: str, field: str, entity_type: type,
                       entity: Any, missing_message: str) -> FieldResult:
        if entity is None:
            return FieldResult.fail(field, missing_message)
        if not isinstance(entity, entity_type):
            raise ContractViolationError(
                f"Expected a {entity_type.__name__} for {field}, got {type(entity).__name__}",
                error_code="contract_violation",
            )
        setattr(self, attribute, entity)
        return FieldResult.ok(field, entity)

    def set_referent(self, referent: Optional[Referent]) -> FieldResult:
        """Set the resolved referent."""
        return self._set_reference("_referent", "referent", Referent, referent,
                                   "A referent with this ID could not be found!")

    def set_year_group(self, year_group: Optional[YearGroup]) -> FieldResult:
        """Set the resolved year group."""
        return self._set_reference("_year_group", "year_group", YearGroup, year_group,
                                   "This year group could not be found!")

    def set_student(self, student: Optional[Student]) -> FieldResult:
        """Set the resolved student."""
        return self._set_reference("_student", "student", Student, student,
                                   "This student could not be found!")

    def set_course(self, course: Optional[Course]) -> FieldResult:
        """Set the resolved course."""
        return self._set_reference("_course", "course", Course, course,
                                   "This course could not be found!")

    def set_exam_description(self, exam_description: str) -> FieldResult:
        """Validate and set the exam description."""
        return _commit(self, "_exam_description", validation.validate_exam_description(exam_description))

    def set_exam_date(self, exam_date: str) -> FieldResult:
        """Validate and set the exam date."""
        return _commit(self, "_exam_date", validation.validate_exam_date(exam_date))

    def set_exam_grade(self, exam_grade: Union[str, int]) -> FieldResult:
        """Set the grade from a string or an int."""
        return _commit(self, "_exam_grade", validation.validate_exam_grade(exam_grade))

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'referent': self._referent.id if self._referent else None,
            'year_group': self._year_group.identifier if self._year_group else None,
            'student': self._student.matriculation_number if self._student else None,
            'course': self._course.abbreviation if self._course else None,
            'exam_description': self._exam_description,
            'exam_date': self._exam_date,
            'exam_grade': self._exam_grade,
        }

    def __repr__(self) -> str:
        return (f"Evaluation(student={self._student.matriculation_number if self._student else None!r}, "
                f"date={self._exam_date!r}, grade={self._exam_grade})")
