"""
Session for the local mock backend: a snapshot of the signed-in user.
"""
import logging
from typing import Optional
from pydantic import ValidationError as PydanticValidationError
from craftfolio.client.routes import SessionState, redirect_for
from craftfolio.local.store import CURRENT_USER_KEY, KeyValueStore
from craftfolio.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class LocalSession:
    """Reads and writes the ``current_user`` slot of a store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def current_user(self) -> Optional[UserResponse]:
        """The signed-in user; an unreadable snapshot ends the session."""
        if self.store.get(CURRENT_USER_KEY) is None:
            return None
        data = self.store.read_json(CURRENT_USER_KEY)
        try:
            return UserResponse(**data)
        except (TypeError, PydanticValidationError):
            logger.warning("Discarding invalid current user snapshot")
            self.clear()
            return None

    def set_user(self, user: UserResponse) -> None:
        self.store.write_json(CURRENT_USER_KEY, user.model_dump(mode="json"))

    def clear(self) -> None:
        self.store.remove(CURRENT_USER_KEY)

    @property
    def state(self) -> SessionState:
        if self.current_user() is None:
            return SessionState.UNAUTHENTICATED
        return SessionState.AUTHENTICATED

    def redirect_for(self, path: str) -> Optional[str]:
        return redirect_for(path, self.state)
