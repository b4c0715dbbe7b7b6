"""
Core module containing the entity model, validation rules and queries.
"""

from .entities import *
from .results import *
from .exceptions import *
from .enums import *
from .queries import *
from .aggregation import *

__all__ = [
    # Entities
    "Entity",
    "KeyedEntity",
    "Referent",
    "YearGroup",
    "Course",
    "Student",
    "Evaluation",

    # Results
    "FieldResult",
    "ApplyResult",

    # Queries
    "find_by_key",
    "find_referent",
    "find_year_group",
    "find_student",
    "find_course",
    "filter_students_by_name",
    "filter_students_by_year_group",
    "filter_evaluations",
    "sort_by_date",
    "first_date",
    "last_date",
    "filter_by_date_range",

    # Aggregation
    "GradeGroup",
    "average_grade",
    "rounded_average",
    "rough_average",
    "group_by_student",
    "group_by_course",

    # Enums
    "EntityType",
    "MenuState",
    "ReportType",

    # Exceptions
    "GradebookException",
    "ValidationError",
    "AuthenticationError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "ContractViolationError",
    "ConfigurationError",
]
