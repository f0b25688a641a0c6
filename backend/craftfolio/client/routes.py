"""
Route guard shared by both session variants.
"""
import enum
from typing import Optional

HOME_ROUTE = "/"
LOGIN_ROUTE = "/login"
REGISTER_ROUTE = "/register"
LANDING_ROUTE = "/dashboard"

PUBLIC_ROUTES = frozenset({HOME_ROUTE, LOGIN_ROUTE, REGISTER_ROUTE})
AUTH_ROUTES = frozenset({LOGIN_ROUTE, REGISTER_ROUTE})


class SessionState(str, enum.Enum):
    """Session lifecycle states."""
    UNAUTHENTICATED = "unauthenticated"
    RESOLVING = "resolving"
    AUTHENTICATED = "authenticated"


def _normalize(path: str) -> str:
    path = (path or HOME_ROUTE).split("?", 1)[0].split("#", 1)[0]
    if len(path) > 1:
        path = path.rstrip("/")
    return path or HOME_ROUTE


def redirect_for(path: str, state: SessionState) -> Optional[str]:
    """
    Return where the client must go instead of ``path``, or None to stay.

    Nothing is decided while the session is still resolving.
    """
    if state == SessionState.RESOLVING:
        return None
    path = _normalize(path)
    if state == SessionState.AUTHENTICATED:
        return LANDING_ROUTE if path in AUTH_ROUTES else None
    return None if path in PUBLIC_ROUTES else LOGIN_ROUTE
