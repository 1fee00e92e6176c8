"""
Data store - the single owned handle on the game database.
Design: one MemeStore is built at startup, initialized once, kept on the
application state and injected into every request that needs it. Each
operation runs in its own short-lived session and commits on success.
"""

import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from memequiz.core.security import hash_password
from memequiz.db.base import Base
from memequiz.db.models import Game, User
from memequiz.db.repositories import GameRepository, MemeRepository, UserRepository

logger = logging.getLogger(__name__)


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class MemeStore:
    """Schema lifecycle and every persistence operation of the game."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = create_async_engine(database_url, echo=echo)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_foreign_keys)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session scoped to one operation. Commits on success, rolls back on error."""
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def initialize(self) -> None:
        """Create the database file and any missing tables. Safe to call repeatedly."""
        url = make_url(self.database_url)
        if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database initialized: %s", url.database)

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def ping(self) -> None:
        """Round-trip a trivial query; raises if the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    # Users

    async def find_user_by_username(self, username: str) -> User | None:
        async with self.session() as session:
            return await UserRepository(session).get_by_username(username)

    async def find_user_by_id(self, user_id: int) -> User | None:
        async with self.session() as session:
            return await UserRepository(session).get_by_id(user_id)

    async def create_user(self, username: str, password: str) -> int:
        """Store a new user with a bcrypt-hashed password. Returns the new id.

        Usernames are not checked for uniqueness.
        """
        async with self.session() as session:
            user = await UserRepository(session).add(
                User(username=username, password=hash_password(password))
            )
            return user.id

    # Memes

    async def list_memes_with_captions(self) -> list[dict[str, Any]]:
        """One record per meme, in order of first appearance, captions in join order."""
        async with self.session() as session:
            rows = await MemeRepository(session).get_rows_with_captions()

        memes: dict[int, dict[str, Any]] = {}
        for row in rows:
            meme = memes.setdefault(
                row.meme_id, {"id": row.meme_id, "url": row.url, "captions": []}
            )
            meme["captions"].append(
                {"id": row.caption_id, "text": row.text, "correct": bool(row.correct)}
            )
        return list(memes.values())

    async def add_meme(self, url: str, captions: Iterable[tuple[str, bool]]) -> int:
        """Insert a meme with its captions in one transaction. Returns the meme id."""
        async with self.session() as session:
            meme = await MemeRepository(session).add_with_captions(url, captions)
            return meme.id

    # Games

    async def record_game(self, user_id: int, score: int, played_at: datetime | None = None) -> int:
        """Insert a finished game stamped with the current UTC time. Returns the game id."""
        date_played = format_timestamp(played_at or datetime.now(timezone.utc))
        async with self.session() as session:
            game = await GameRepository(session).add(
                Game(user_id=user_id, score=score, date_played=date_played)
            )
            return game.id

    async def count_games_for_user(self, user_id: int) -> int:
        async with self.session() as session:
            return await GameRepository(session).count_for_user(user_id)

    async def list_game_history_for_user(self, user_id: int) -> list[Game]:
        async with self.session() as session:
            return await GameRepository(session).get_history_for_user(user_id)
