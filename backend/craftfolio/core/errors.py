"""
Domain error taxonomy shared by the API, the HTTP client and the local backend.
"""
from typing import Optional


class CraftfolioError(Exception):
    """Base class for every error surfaced to the user."""

    status_code: int = 400
    title: str = "Request failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CraftfolioError):
    """A required field is missing or a value is invalid."""

    status_code = 422
    title = "Invalid input"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConflictError(CraftfolioError):
    """Username or email already taken."""

    status_code = 409
    title = "Already exists"


class AuthError(CraftfolioError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = 401
    title = "Authentication failed"


class ForbiddenError(CraftfolioError):
    """Authenticated, but not allowed to touch the record."""

    status_code = 403
    title = "Access denied"


class NotFoundError(CraftfolioError):
    """Operation on an unknown identifier."""

    status_code = 404
    title = "Not found"


class NetworkError(CraftfolioError):
    """Transport failure or unexpected server response."""

    status_code = 503
    title = "Network error"


def error_for_status(status_code: int, message: str) -> CraftfolioError:
    """Map an HTTP status code back onto the error taxonomy."""
    if status_code in (400, 422):
        return ValidationError(message)
    if status_code == 401:
        return AuthError(message)
    if status_code == 403:
        return ForbiddenError(message)
    if status_code == 404:
        return NotFoundError(message)
    if status_code == 409:
        return ConflictError(message)
    return NetworkError(message)
