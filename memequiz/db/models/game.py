"""
Game model - one completed quiz round.
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from memequiz.db.base import Base


class Game(Base):
    """Score of a finished round. Immutable once written."""

    __tablename__ = "games"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    # ISO-8601 UTC string, e.g. 2024-05-01T12:00:00.000Z; sorts chronologically as text
    date_played: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Game(id={self.id}, user_id={self.user_id}, score={self.score})>"
