"""Name Validator — the name must be present and contain visible text."""

from formguard.validators.base import BaseValidator
from formguard.validators.models import ErrorCode, FieldError


class NameValidator(BaseValidator):
    """Rejects a missing, non-text, empty, or whitespace-only name."""

    field = "name"

    @property
    def name(self) -> str:
        return "NameValidator"

    def validate(self, data: dict) -> list[FieldError]:
        value = self._get_text(data, self.field)
        if value is None or not value.strip():
            return [self._error(ErrorCode.MISSING_NAME, self.field)]
        return []
