"""Validation models — user input record, field errors, and the tagged result.

All validation is deterministic: same input → same output, no side effects,
the input record is never mutated.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Deterministic error codes, one per validation rule."""

    MISSING_NAME = "MISSING_NAME"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"


# Ready-to-display messages per error code
DEFAULT_MESSAGES = {
    ErrorCode.MISSING_NAME: "Name is required",
    ErrorCode.INVALID_EMAIL_FORMAT: "Invalid email format",
}

# Code reported when a field is absent or not text, whatever the chain holds
SHAPE_ERROR_CODES = {
    "name": ErrorCode.MISSING_NAME,
    "email": ErrorCode.INVALID_EMAIL_FORMAT,
}


class UserInput(BaseModel):
    """A candidate record submitted by a form or an API request.

    Construction only fixes the shape; the rules are checked by the
    validation engine.
    """

    name: str
    email: str

    model_config = {"frozen": True}


class FieldError(BaseModel):
    """A single violated rule on a single field."""

    code: ErrorCode
    field: str     # "name" or "email"
    message: str   # Human-readable, safe to show to the user

    model_config = {"use_enum_values": True, "frozen": True}


class InputValidationError(ValueError):
    """Raised at boundaries that opt into exceptions for failed validation."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Input failed validation ({len(self.errors)} error(s): {fields})")


class ValidationResult(BaseModel):
    """Tagged result — either the validated input or every violated rule."""

    ok: bool = Field(description="True if no rule was violated")
    value: Optional[UserInput] = Field(default=None, description="Validated input, unchanged")
    errors: list[FieldError] = Field(default_factory=list)

    @classmethod
    def build(cls, value: Optional[UserInput], errors: list[FieldError]) -> "ValidationResult":
        """Build a result from the collected findings.

        Errors win: if anything was reported the value is dropped, so a
        failed result never carries a half-valid record.
        """
        if errors:
            return cls(ok=False, value=None, errors=list(errors))
        if value is None:
            raise ValueError("A successful result needs a validated value")
        return cls(ok=True, value=value, errors=[])

    def messages_by_field(self) -> dict[str, list[str]]:
        """Group error messages per field, for rendering next to form inputs."""
        grouped: dict[str, list[str]] = {}
        for err in self.errors:
            grouped.setdefault(err.field, []).append(err.message)
        return grouped

    def raise_for_errors(self) -> UserInput:
        """Return the validated value, or raise InputValidationError."""
        if not self.ok:
            raise InputValidationError(self.errors)
        return self.value
