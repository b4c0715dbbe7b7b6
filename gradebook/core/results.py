"""
Result types returned by validating setters.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import ValidationError


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating (and committing) a single field."""
    success: bool
    field: str
    value: Any = None
    message: str = ""

    @classmethod
    def ok(cls, field: str, value: Any) -> "FieldResult":
        return cls(True, field, value)

    @classmethod
    def fail(cls, field: str, message: str) -> "FieldResult":
        return cls(False, field, None, message)

    def __bool__(self) -> bool:
        return self.success

    def raise_for_failure(self) -> Any:
        """Return the committed value or raise ValidationError for a failure."""
        if not self.success:
            raise ValidationError(self.message, field=self.field, error_code="invalid_field")
        return self.value


@dataclass(frozen=True)
class ApplyResult:
    """
    Outcome of applying several raw field values to a draft entity.

    ``failure`` holds the first failing field; ``index`` is its position in
    the order the fields were applied.
    """
    success: bool
    failure: Optional[FieldResult] = None
    index: Optional[int] = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def field(self) -> Optional[str]:
        return self.failure.field if self.failure is not None else None

    @property
    def message(self) -> str:
        return self.failure.message if self.failure is not None else ""
