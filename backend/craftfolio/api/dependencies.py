"""
FastAPI dependencies for injection.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from craftfolio.core.errors import AuthError
from craftfolio.core.security import decode_access_token
from craftfolio.db.session import get_db
from craftfolio.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to a user, or fail with 401."""
    if credentials is None:
        raise AuthError("Not authenticated")
    
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise AuthError("Invalid or expired token")
    
    user_id = payload.get("user_id")
    user = db.query(User).filter(User.id == user_id).first() if user_id else None
    if not user or user.username != payload.get("sub"):
        raise AuthError("Invalid or expired token")
    return user
