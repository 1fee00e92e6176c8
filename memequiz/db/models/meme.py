"""
Meme and caption models.
Memes and captions are linked through meme_captions; each meme normally has
several captions, exactly one of them flagged correct.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from memequiz.db.base import Base

# Plain link table, no primary key of its own.
meme_captions = Table(
    "meme_captions",
    Base.metadata,
    Column("meme_id", Integer, ForeignKey("memes.id"), nullable=False),
    Column("caption_id", Integer, ForeignKey("captions.id"), nullable=False),
)


class Meme(Base):
    """A meme image, addressed by the URL it is served from."""

    __tablename__ = "memes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Meme(id={self.id}, url={self.url})>"


class Caption(Base):
    """Candidate caption. `correct` is stored as 0/1."""

    __tablename__ = "captions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    correct: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Caption(id={self.id}, correct={self.correct})>"
