"""Validation Engine — runs every validator and merges the findings into one result.

This is the main entry point for input validation. Both the client-side
check endpoint and the server-side submission flow go through it.

Usage:
    engine = ValidationEngine()
    result = engine.validate({"name": "Ada", "email": "ada@example.com"})
    if not result.ok:
        # Show result.errors to the user
"""

import time
import json
from typing import Any, Optional, Union

import structlog

from formguard.validators.base import BaseValidator
from formguard.validators.models import (
    DEFAULT_MESSAGES,
    SHAPE_ERROR_CODES,
    FieldError,
    UserInput,
    ValidationResult,
)

# Import all validators
from formguard.validators.name_validator import NameValidator
from formguard.validators.email_format_validator import EmailFormatValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Orchestrates all validators and produces a single ValidationResult.

    Design principles:
        - Deterministic: same input → same output
        - Exhaustive: every validator runs, all findings are reported
        - Extensible: add validators without modifying engine
        - Observable: logs every validation run with timing
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators = validators if validators is not None else self._default_validators()

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validator chain in reporting order."""
        return [
            NameValidator(),
            EmailFormatValidator(),
        ]

    def validate(self, candidate: Union[UserInput, dict, str, Any]) -> ValidationResult:
        """Run all validators against the candidate and produce a result.

        Args:
            candidate: UserInput, raw dict, or JSON object string

        Returns:
            ValidationResult carrying the unchanged UserInput, or every FieldError
        """
        start_time = time.perf_counter()

        data, original = self._coerce(candidate)

        all_errors: list[FieldError] = []
        for validator in self.validators:
            try:
                all_errors.extend(validator.validate(data))
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    error=str(e),
                )
                raise

        value = None
        if not all_errors:
            if original is not None:
                value = original
            else:
                all_errors.extend(self._shape_errors(data))
                if not all_errors:
                    value = UserInput(name=data["name"], email=data["email"])

        result = ValidationResult.build(value, all_errors)

        logger.info(
            "validation_complete",
            ok=result.ok,
            error_codes=[e.code for e in result.errors],
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return result

    @staticmethod
    def _coerce(candidate: Any) -> tuple[dict, Optional[UserInput]]:
        """Turn any accepted candidate into a read-only view keyed by field name."""
        if isinstance(candidate, UserInput):
            return candidate.model_dump(), candidate

        if isinstance(candidate, str):
            try:
                candidate = json.loads(candidate)
            except (json.JSONDecodeError, RecursionError) as e:
                logger.warning("candidate_not_json", error=str(e))
                return {}, None

        if not isinstance(candidate, dict):
            logger.warning("candidate_not_object", candidate_type=type(candidate).__name__)
            return {}, None

        return candidate, None

    @staticmethod
    def _shape_errors(data: dict) -> list[FieldError]:
        """Fields a trimmed chain let through that cannot form a UserInput."""
        return [
            FieldError(code=code, field=field, message=DEFAULT_MESSAGES[code])
            for field, code in SHAPE_ERROR_CODES.items()
            if not isinstance(data.get(field), str)
        ]

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]


# Module-level singleton
validation_engine = ValidationEngine()


def validate(candidate: Union[UserInput, dict, str, Any]) -> ValidationResult:
    """Validate a candidate with the default engine."""
    return validation_engine.validate(candidate)
