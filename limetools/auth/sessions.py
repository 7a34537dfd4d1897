"""In-memory session table: opaque token -> user email"""

import secrets
from typing import Dict, Optional


class SessionStore:
    """
    Process-lifetime session map.

    Sessions are never persisted and never expire; a restart signs everyone
    out. One instance is created per application and shared via app.state.
    """

    def __init__(self):
        self._sessions: Dict[str, str] = {}

    def create(self, email: str) -> str:
        """Bind a fresh 128-bit hex token to email and return it"""
        token = secrets.token_hex(16)
        self._sessions[token] = email
        return token

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        return self._sessions.get(token)

    def destroy(self, token: Optional[str]) -> None:
        if token:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, token: object) -> bool:
        return token in self._sessions
