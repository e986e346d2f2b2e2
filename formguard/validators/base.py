"""Base validator — abstract class implementing the Strategy Pattern.

Each validator checks one field independently, so the engine can run them
all and report every violated rule at once.
"""

from abc import ABC, abstractmethod
from typing import Optional

from formguard.validators.models import DEFAULT_MESSAGES, ErrorCode, FieldError


class BaseValidator(ABC):
    """Abstract base for all input validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns a list of FieldError (empty = no issues)
        - validate() never mutates its input
        - No network calls, no randomness
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, data: dict) -> list[FieldError]:
        """Run validation checks against the candidate record.

        Args:
            data: Raw candidate record, keyed by field name

        Returns:
            List of FieldError findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _error(self, code: ErrorCode, field: str, message: Optional[str] = None) -> FieldError:
        """Convenience method to create a FieldError with the default message."""
        return FieldError(
            code=code,
            field=field,
            message=message or DEFAULT_MESSAGES[code],
        )

    def _get_text(self, data: dict, field: str) -> Optional[str]:
        """Safely extract a text field; anything that is not a str counts as absent."""
        value = data.get(field)
        if isinstance(value, str):
            return value
        return None
