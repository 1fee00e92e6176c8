"""
Credential verification - how a username/password pair becomes a user.
Routes depend on the CredentialVerifier protocol only, so another scheme can
be swapped in through a FastAPI dependency override.
"""

from dataclasses import dataclass
from typing import Protocol

from memequiz.core.security import verify_password
from memequiz.db.models import User
from memequiz.db.store import MemeStore

USER_NOT_FOUND = "User not found. Please register."
INCORRECT_PASSWORD = "Incorrect password."


@dataclass
class AuthResult:
    """Outcome of a verification: a user, or the reason there is none."""

    user: User | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.user is not None


class CredentialVerifier(Protocol):
    async def verify(self, username: str, password: str) -> AuthResult: ...


class LocalCredentialVerifier:
    """Checks the password against the bcrypt hash stored for the username."""

    def __init__(self, store: MemeStore):
        self.store = store

    async def verify(self, username: str, password: str) -> AuthResult:
        user = await self.store.find_user_by_username(username)
        if user is None:
            return AuthResult(message=USER_NOT_FOUND)
        if not verify_password(password, user.password):
            return AuthResult(message=INCORRECT_PASSWORD)
        return AuthResult(user=user)
