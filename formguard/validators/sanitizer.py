"""Sanitizer — cleans a validated input before it is stored or rendered.

Only validated input is sanitized; the result is a new UserInput and the
original is left untouched.
"""

import html
from typing import Optional

from formguard.validators.email_format_validator import EmailFormatValidator
from formguard.validators.engine import ValidationEngine, validation_engine
from formguard.validators.models import UserInput


def clean_name(name: str) -> str:
    """Collapse whitespace and escape HTML special characters.

    Entities are decoded before escaping, so cleaning an already clean name
    leaves it unchanged. A literal "&amp;" typed by a user is read as "&".
    """
    return html.escape(html.unescape(" ".join(name.split())), quote=True)


def sanitize(user_input: UserInput, engine: Optional[ValidationEngine] = None) -> UserInput:
    """Return a sanitized copy of a valid input.

    Raises:
        InputValidationError: if the input does not pass validation
    """
    (engine or validation_engine).validate(user_input).raise_for_errors()

    email = EmailFormatValidator().normalize(user_input.email) or user_input.email
    return UserInput(name=clean_name(user_input.name), email=email)
