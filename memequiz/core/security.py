"""
Security: password hashing.
Passwords are stored as salted bcrypt hashes, never in plain text.
"""

from passlib.context import CryptContext

from memequiz.config import get_settings

settings = get_settings()
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """One-way salted hash for storage."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison for login."""
    return pwd_context.verify(plain, hashed)
