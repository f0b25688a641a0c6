"""
User directory service backed by the database.
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from craftfolio.core.errors import AuthError, ConflictError, NotFoundError
from craftfolio.core.security import get_password_hash, verify_password
from craftfolio.core.utils import utcnow
from craftfolio.models.user import User
from craftfolio.schemas.user import UserUpdate
from craftfolio.services.validation import validate_credentials, validate_email

logger = logging.getLogger(__name__)


def get_user(user_id: str, db: Session) -> User:
    """Get a user by id or raise NotFoundError."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def get_user_by_username(username: str, db: Session) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def _ensure_email_free(email: str, db: Session, exclude_id: Optional[str] = None) -> None:
    query = db.query(User).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first():
        raise ConflictError("Email already registered")


def register_user(
    username: str,
    password: str,
    email: Optional[str] = None,
    db: Session = None
) -> User:
    """Register a new user with an empty profile."""
    username = validate_credentials(username, password)
    email = validate_email(email) if email else None

    if get_user_by_username(username, db):
        raise ConflictError("Username already exists")
    if email:
        _ensure_email_free(email, db)
    
    user = User(
        username=username,
        email=email,
        hashed_password=get_password_hash(password),
        skills=[]
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration
        db.rollback()
        raise ConflictError("Username or email already exists")
    db.refresh(user)
    
    logger.info(f"Registered user '{user.username}' ({user.id})")
    return user


def authenticate_user(username: str, password: str, db: Session) -> User:
    """Check credentials and return the matching user."""
    user = get_user_by_username(username, db)
    if not user or not verify_password(password, user.hashed_password):
        logger.info(f"Failed login attempt for '{username}'")
        raise AuthError("Incorrect username or password")
    return user


def update_profile(user_id: str, patch: UserUpdate, db: Session) -> User:
    """Apply a profile patch; only supplied fields change."""
    user = get_user(user_id, db)
    changes = patch.changes()
    
    if changes.get("email"):
        _ensure_email_free(changes["email"], db, exclude_id=user.id)
    if "skills" in changes:
        changes["skills"] = changes["skills"] or []
    
    for field, value in changes.items():
        setattr(user, field, value)
    user.updated_at = utcnow()
    
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already registered")
    db.refresh(user)
    
    logger.debug(f"Updated profile of {user.id}: {sorted(changes)}")
    return user
