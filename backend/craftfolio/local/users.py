"""
User directory over the local key-value store.
"""
import logging
from typing import List, Optional
from craftfolio.core.errors import AuthError, ConflictError, CraftfolioError, NotFoundError, ValidationError
from craftfolio.core.security import get_password_hash, verify_password
from craftfolio.core.utils import new_id, utcnow
from craftfolio.local.session import LocalSession
from craftfolio.local.store import KeyValueStore, USERS_KEY
from craftfolio.schemas.user import StoredUser, UserResponse, UserUpdate
from craftfolio.services.validation import validate_credentials, validate_email

logger = logging.getLogger(__name__)


class LocalUserDirectory:
    """Registers, authenticates and edits users stored in one slot."""

    def __init__(self, store: KeyValueStore, session: LocalSession):
        self.store = store
        self.session = session

    def _load(self) -> List[StoredUser]:
        return [StoredUser(**item) for item in self.store.read_json(USERS_KEY, [])]

    def _save(self, users: List[StoredUser]) -> None:
        self.store.write_json(USERS_KEY, [u.model_dump(mode="json") for u in users])

    def register(self, username: str, email: str, password: str) -> UserResponse:
        """Create a user with an empty profile. Does not sign in."""
        username = validate_credentials(username, password)
        email = validate_email(email)

        users = self._load()
        if any(u.username == username for u in users):
            raise ConflictError("Username already exists")
        if any(u.email == email for u in users):
            raise ConflictError("Email already registered")
        
        now = utcnow()
        user = StoredUser(
            id=new_id(),
            username=username,
            email=email,
            skills=[],
            created_at=now,
            updated_at=now,
            hashed_password=get_password_hash(password)
        )
        users.append(user)
        self._save(users)
        logger.info(f"Registered local user '{username}'")
        return user.public()

    def authenticate(self, email: str, password: str) -> UserResponse:
        """Check credentials and start a session for the user."""
        try:
            email = validate_email(email)
        except CraftfolioError:
            raise AuthError("Incorrect email or password")
        for user in self._load():
            if user.email == email and verify_password(password, user.hashed_password):
                public = user.public()
                self.session.set_user(public)
                return public
        raise AuthError("Incorrect email or password")

    def get_user(self, user_id: str) -> Optional[UserResponse]:
        for user in self._load():
            if user.id == user_id:
                return user.public()
        return None

    def update_profile(self, user_id: str, patch: UserUpdate) -> UserResponse:
        """Apply a profile patch; only supplied fields change."""
        users = self._load()
        for index, user in enumerate(users):
            if user.id == user_id:
                break
        else:
            raise NotFoundError("User not found")
        
        changes = patch.changes()
        if "skills" in changes:
            changes["skills"] = changes["skills"] or []
        if "email" in changes:
            # Sign-in is by email, so the address is fixed after registration
            raise ValidationError("Email cannot be changed", field="email")
        
        updated = user.model_copy(update={**changes, "updated_at": utcnow()})
        users[index] = updated
        self._save(users)
        
        public = updated.public()
        current = self.session.current_user()
        if current is not None and current.id == user_id:
            self.session.set_user(public)
        return public

    def current_user(self) -> Optional[UserResponse]:
        return self.session.current_user()

    def sign_out(self) -> None:
        self.session.clear()
