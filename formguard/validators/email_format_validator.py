"""Email Format Validator — syntax check against the email-address grammar.

Uses email-validator in syntax-only mode: no DNS lookups, so the check
stays pure and fast.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from formguard.config import get_settings
from formguard.validators.base import BaseValidator
from formguard.validators.models import ErrorCode, FieldError


class EmailFormatValidator(BaseValidator):
    """Rejects a missing, non-text, or malformed email address."""

    field = "email"

    def __init__(self, allow_smtputf8: Optional[bool] = None):
        if allow_smtputf8 is None:
            allow_smtputf8 = get_settings().EMAIL_ALLOW_SMTPUTF8
        self.allow_smtputf8 = allow_smtputf8

    @property
    def name(self) -> str:
        return "EmailFormatValidator"

    def validate(self, data: dict) -> list[FieldError]:
        value = self._get_text(data, self.field)
        if value is None or not self.is_valid(value):
            return [self._error(ErrorCode.INVALID_EMAIL_FORMAT, self.field)]
        return []

    def is_valid(self, email: str) -> bool:
        return self.normalize(email) is not None

    def normalize(self, email: str) -> Optional[str]:
        """Return the normalized address, or None if it is not valid."""
        try:
            info = validate_email(
                email,
                check_deliverability=False,
                allow_smtputf8=self.allow_smtputf8,
            )
        except EmailNotValidError:
            return None
        return info.normalized
