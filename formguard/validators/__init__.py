"""Input Validator — deterministic validation layer for user-submitted records.

Usage:
    from formguard.validators import validate

    result = validate({"name": "Ada", "email": "ada@example.com"})
    if not result.ok:
        # Show every entry of result.errors next to its field
"""

from formguard.validators.engine import ValidationEngine, validation_engine, validate
from formguard.validators.models import (
    ErrorCode,
    FieldError,
    InputValidationError,
    UserInput,
    ValidationResult,
)
from formguard.validators.sanitizer import sanitize

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "sanitize",
    "ValidationResult",
    "FieldError",
    "UserInput",
    "InputValidationError",
    "ErrorCode",
]
