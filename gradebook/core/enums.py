"""
Enumerations and constants for the gradebook.
"""

from enum import Enum


class EntityType(Enum):
    """Types of entities owned by a referent."""
    REFERENT = "referent"
    YEAR_GROUP = "year_group"
    COURSE = "course"
    STUDENT = "student"
    EVALUATION = "evaluation"


class MenuState(Enum):
    """Menu states of an interactive session."""
    DEFAULT = "default"  # Nobody logged in
    LOGGED_IN = "logged_in"
    ANALYSIS = "analysis"


class ReportType(Enum):
    """Reports available in the analysis menu."""
    STUDENT_ANALYSIS = "student_analysis"
    CERTIFICATE = "certificate"
    PERIOD = "period"


# Validation bounds
REFERENT_ID_LENGTH = 5
REFERENT_ID_MIN = 10000
REFERENT_ID_MAX = 99999
PASSWORD_MIN_LENGTH = 4
MIN_YEAR = 1950
DESCRIPTION_MIN_LENGTH = 2
ABBREVIATION_MIN_LENGTH = 2
ABBREVIATION_MAX_LENGTH = 4
MATRICULATION_NUMBER_LENGTH = 10
GRADE_MIN = 1
GRADE_MAX = 5
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

DATE_FORMAT = "%d.%m.%Y"
