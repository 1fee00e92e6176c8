"""
User model - a registered player.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from memequiz.db.base import Base


class User(Base):
    """Player account. Usernames are not unique at the schema level."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    # bcrypt hash, never the plain password
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
