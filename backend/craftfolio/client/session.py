"""
Client-side session for the remote API variant.

The session is an explicit object: create one per client, pass it to the
code that needs the current user, and drop it when the client goes away.
"""
import logging
from typing import Callable, Optional, TypeVar
from craftfolio.core.errors import AuthError, CraftfolioError
from craftfolio.client.api_client import ApiClient
from craftfolio.client.routes import SessionState, redirect_for
from craftfolio.local.store import KeyValueStore, TOKEN_KEY
from craftfolio.schemas.user import UserResponse, UserUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuthContext:
    """Tracks the bearer token and current user of one client."""

    def __init__(self, api: ApiClient, store: KeyValueStore):
        self.api = api
        self.store = store
        self.state = SessionState.UNAUTHENTICATED
        self.token: Optional[str] = None
        self.user: Optional[UserResponse] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED

    def start(self) -> SessionState:
        """Resume a stored session, if any."""
        stored = self.store.get(TOKEN_KEY)
        if not stored:
            self.state = SessionState.UNAUTHENTICATED
            return self.state
        self.token = stored.decode("utf-8")
        self.state = SessionState.RESOLVING
        try:
            self._load_profile()
        except CraftfolioError as e:
            # Token is invalid or expired, or the server is unreachable
            logger.info(f"Discarding stored session: {e.message}")
            self._teardown()
        return self.state

    def _load_profile(self) -> None:
        self.user = self.api.get_me(self.token)
        self.state = SessionState.AUTHENTICATED

    def _teardown(self) -> None:
        self.store.remove(TOKEN_KEY)
        self.token = None
        self.user = None
        self.state = SessionState.UNAUTHENTICATED

    def login(self, username: str, password: str) -> UserResponse:
        """Exchange credentials for a token and load the profile."""
        token = self.api.login(username, password)
        self.store.set(TOKEN_KEY, token.encode("utf-8"))
        self.token = token
        self.state = SessionState.RESOLVING
        try:
            self._load_profile()
        except CraftfolioError:
            self._teardown()
            raise
        logger.info(f"Signed in as '{self.user.username}'")
        return self.user

    def register(self, username: str, password: str, email: Optional[str] = None) -> UserResponse:
        """Create the account, then sign in with it."""
        self.api.register(username, password, email=email)
        return self.login(username, password)

    def logout(self) -> None:
        """End the session. Safe to call when already signed out."""
        self._teardown()

    def current_user(self) -> Optional[UserResponse]:
        return self.user

    def call(self, operation: Callable[[str], T]) -> T:
        """
        Run an authenticated API call with the current token.

        An authorization failure tears the session down before the error
        is re-raised.
        """
        if not self.is_authenticated:
            raise AuthError("Not authenticated")
        try:
            return operation(self.token)
        except AuthError:
            logger.info("Session rejected by the server; signing out")
            self._teardown()
            raise

    def refresh_user(self, user: UserResponse) -> None:
        """Replace the cached profile after the user edits it."""
        if self.user is not None and self.user.id == user.id:
            self.user = user

    def update_profile(self, patch: UserUpdate) -> UserResponse:
        user = self.call(lambda token: self.api.update_me(token, patch))
        self.refresh_user(user)
        return user

    def redirect_for(self, path: str) -> Optional[str]:
        return redirect_for(path, self.state)
