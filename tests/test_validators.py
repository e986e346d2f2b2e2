"""Unit tests for the individual field validators."""

import pytest

from formguard.validators.email_format_validator import EmailFormatValidator
from formguard.validators.models import ErrorCode
from formguard.validators.name_validator import NameValidator


# -----------------------------------------------------------------------------
# NameValidator
# -----------------------------------------------------------------------------


class TestNameValidator:
    @pytest.mark.parametrize("name", ["Ada", "Ada Lovelace", " Ada ", "李"])
    def test_non_empty_name_passes(self, name: str) -> None:
        assert NameValidator().validate({"name": name}) == []

    @pytest.mark.parametrize("name", ["", " ", "\t\n", "   　"])
    def test_empty_or_whitespace_name_fails(self, name: str) -> None:
        errors = NameValidator().validate({"name": name})
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.MISSING_NAME
        assert errors[0].field == "name"
        assert errors[0].message == "Name is required"

    def test_missing_field_fails(self) -> None:
        errors = NameValidator().validate({})
        assert [e.code for e in errors] == [ErrorCode.MISSING_NAME]

    @pytest.mark.parametrize("name", [None, 42, ["Ada"], {"first": "Ada"}])
    def test_non_text_name_fails(self, name) -> None:
        errors = NameValidator().validate({"name": name})
        assert [e.code for e in errors] == [ErrorCode.MISSING_NAME]

    def test_does_not_mutate_input(self) -> None:
        data = {"name": "  ", "email": "x"}
        NameValidator().validate(data)
        assert data == {"name": "  ", "email": "x"}


# -----------------------------------------------------------------------------
# EmailFormatValidator
# -----------------------------------------------------------------------------


class TestEmailFormatValidator:
    @pytest.mark.parametrize(
        "email",
        [
            "ada@example.com",
            "ada.lovelace@example.co.uk",
            "ada+forms@mail.example.org",
            "ADA@EXAMPLE.COM",
        ],
    )
    def test_valid_addresses_pass(self, email: str) -> None:
        assert EmailFormatValidator().validate({"email": email}) == []

    @pytest.mark.parametrize(
        "email",
        [
            "bad",
            "",
            "ada.example.com",
            "ada@",
            "@example.com",
            "ada@example",
            "ada@@example.com",
            "ada lovelace@example.com",
        ],
    )
    def test_malformed_addresses_fail(self, email: str) -> None:
        errors = EmailFormatValidator().validate({"email": email})
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.INVALID_EMAIL_FORMAT
        assert errors[0].field == "email"
        assert errors[0].message == "Invalid email format"

    def test_missing_field_fails(self) -> None:
        errors = EmailFormatValidator().validate({"name": "Ada"})
        assert [e.code for e in errors] == [ErrorCode.INVALID_EMAIL_FORMAT]

    def test_non_text_email_fails(self) -> None:
        errors = EmailFormatValidator().validate({"email": 12345})
        assert [e.code for e in errors] == [ErrorCode.INVALID_EMAIL_FORMAT]

    def test_smtputf8_can_be_disallowed(self) -> None:
        address = "josé@example.com"
        assert EmailFormatValidator(allow_smtputf8=True).validate({"email": address}) == []
        errors = EmailFormatValidator(allow_smtputf8=False).validate({"email": address})
        assert [e.code for e in errors] == [ErrorCode.INVALID_EMAIL_FORMAT]

    def test_normalize_lowercases_domain(self) -> None:
        assert EmailFormatValidator().normalize("Ada@EXAMPLE.com") == "Ada@example.com"

    def test_normalize_returns_none_for_invalid(self) -> None:
        assert EmailFormatValidator().normalize("bad") is None
