"""
Field checks shared by the database and local services.
"""
from typing import Optional
from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from craftfolio.core.errors import ValidationError


def require_text(value: Optional[str], field: str) -> str:
    """Return the stripped value, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise ValidationError(f"{field.replace('_', ' ').capitalize()} is required", field=field)
    return value.strip()


def validate_credentials(username: Optional[str], password: Optional[str]) -> str:
    """Validate registration input and return the normalized username."""
    username = require_text(username, "username")
    if len(username) > 50:
        raise ValidationError("Username must be at most 50 characters", field="username")
    if not password:
        raise ValidationError("Password is required", field="password")
    return username


_email_adapter = TypeAdapter(EmailStr)


def validate_email(value: Optional[str]) -> str:
    """Return the normalized email address, or raise if it is invalid."""
    value = require_text(value, "email")
    try:
        return _email_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValidationError("Email address is invalid", field="email")
