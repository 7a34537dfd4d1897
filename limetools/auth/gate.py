"""
Auth gate: resolves the caller from a session token and checks the admin role.
"""

from typing import Optional

from limetools.auth.sessions import SessionStore
from limetools.models.user import User
from limetools.services.user_store import UserStore
from limetools.utils.logger import get_logger

logger = get_logger(__name__)


class AuthGate:
    """Identity resolution over a SessionStore and a UserStore"""

    def __init__(self, sessions: SessionStore, user_store: UserStore):
        self.sessions = sessions
        self.user_store = user_store

    def current_user(self, token: Optional[str]) -> Optional[User]:
        """Return the user bound to token, or None"""
        email = self.sessions.resolve(token)
        if not email:
            return None
        return self.user_store.find_by_email(email)

    @staticmethod
    def require_admin(user: Optional[User]) -> bool:
        return user is not None and user.role == "admin"

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return user if credentials are valid, else None"""
        user = self.user_store.find_by_email(email)
        if not user or user.password != password:
            return None
        return user

    def login(self, email: str, password: str) -> Optional[str]:
        """Check credentials and open a session; returns the token or None"""
        user = self.authenticate(email, password)
        if not user:
            logger.info("Login failed", email=email)
            return None
        token = self.sessions.create(user.email)
        logger.info("Login successful", email=user.email, role=user.role)
        return token

    def logout(self, token: Optional[str]) -> None:
        email = self.sessions.resolve(token)
        self.sessions.destroy(token)
        if email:
            logger.info("Logged out", email=email)
