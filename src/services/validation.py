"""Explicit input validation for service calls.

Each ``validate_*`` function inspects already-parsed request data and returns
a ``ValidationResult`` instead of raising, so callers can collect every field
problem at once. ``raise_for_errors`` is the usual way to act on the result.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.services.exceptions import FieldError, ValidationError

EMAIL_MAX_LENGTH = 255
# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_LENGTH = 72
NAME_MAX_LENGTH = 255
TITLE_MAX_LENGTH = 255
LINK_MAX_LENGTH = 2048
DESCRIPTION_MAX_LENGTH = 10000

PROFILE_FIELDS = ("email", "first_name", "last_name")
BOOKMARK_FIELDS = ("title", "link", "description")

_http_url = TypeAdapter(HttpUrl)


@dataclass
class ValidationResult:
    """Outcome of a validation pass: ok when no field errors were collected."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field=field_name, message=message))


def raise_for_errors(result: ValidationResult) -> None:
    """Raise ``ValidationError`` carrying the result's field errors, if any."""
    if not result.ok:
        raise ValidationError(result.errors)


def normalize_email(email: str) -> str:
    """Normalize an email for storage and lookup."""
    return email.strip().lower()


def _check_email(result: ValidationResult, email: Any) -> None:
    if not isinstance(email, str) or not email.strip():
        result.add("email", "Email is required")
        return
    if len(email) > EMAIL_MAX_LENGTH:
        result.add("email", f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        return
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        result.add("email", str(e))


def _check_text(
    result: ValidationResult,
    field_name: str,
    value: Any,
    *,
    max_length: int,
    required: bool,
) -> None:
    if value is None:
        if required:
            result.add(field_name, f"{field_name.capitalize()} is required")
        return
    if not isinstance(value, str):
        result.add(field_name, f"{field_name.capitalize()} must be a string")
        return
    if required and not value.strip():
        result.add(field_name, f"{field_name.capitalize()} must not be empty")
        return
    if len(value) > max_length:
        result.add(field_name, f"{field_name.capitalize()} must be at most {max_length} characters")


def _check_link(result: ValidationResult, link: Any) -> None:
    _check_text(result, "link", link, max_length=LINK_MAX_LENGTH, required=True)
    if any(error.field == "link" for error in result.errors):
        return
    try:
        _http_url.validate_python(link.strip())
    except PydanticValidationError:
        result.add("link", "Link must be an absolute http(s) URL")


def validate_credentials(email: Any, password: Any, min_password_length: int) -> ValidationResult:
    """Validate an email/password pair for signup."""
    result = ValidationResult()
    _check_email(result, email)

    if not isinstance(password, str) or not password:
        result.add("password", "Password is required")
    elif len(password) < min_password_length:
        result.add("password", f"Password must be at least {min_password_length} characters")
    elif len(password.encode("utf-8")) > PASSWORD_MAX_LENGTH:
        result.add("password", f"Password must be at most {PASSWORD_MAX_LENGTH} bytes")

    return result


def validate_signin(email: Any, password: Any) -> ValidationResult:
    """Validate the shape of a signin request.

    Checks email syntax and that a password was sent, but not the password
    length policy, which would say nothing useful about the credentials.
    """
    result = ValidationResult()
    _check_email(result, email)
    if not isinstance(password, str) or not password:
        result.add("password", "Password is required")
    return result


def validate_profile_patch(patch: Mapping[str, Any]) -> ValidationResult:
    """Validate a partial profile update.

    Only keys present in ``patch`` are checked. Email can't be cleared;
    name fields can be set to ``None``.
    """
    result = ValidationResult()
    for key in patch:
        if key not in PROFILE_FIELDS:
            result.add(key, "Unknown field")

    if "email" in patch:
        _check_email(result, patch["email"])
    for name_field in ("first_name", "last_name"):
        if name_field in patch:
            _check_text(
                result, name_field, patch[name_field], max_length=NAME_MAX_LENGTH, required=False
            )
    return result


def validate_bookmark(fields: Mapping[str, Any], *, partial: bool = False) -> ValidationResult:
    """Validate bookmark fields for create (``partial=False``) or edit.

    On create, ``title`` and ``link`` must be present. On edit, only the keys
    present are checked, but ``title`` and ``link`` still can't be cleared.
    """
    result = ValidationResult()
    for key in fields:
        if key not in BOOKMARK_FIELDS:
            result.add(key, "Unknown field")

    if not partial or "title" in fields:
        _check_text(
            result, "title", fields.get("title"), max_length=TITLE_MAX_LENGTH, required=True
        )
    if not partial or "link" in fields:
        _check_link(result, fields.get("link"))
    if "description" in fields:
        _check_text(
            result,
            "description",
            fields["description"],
            max_length=DESCRIPTION_MAX_LENGTH,
            required=False,
        )
    return result
