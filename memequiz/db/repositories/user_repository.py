"""
User repository - lookups used by registration and login.
"""

from sqlalchemy import select

from memequiz.db.models.user import User
from memequiz.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> User | None:
        """First user registered under this name, or None.

        Usernames are not unique; when duplicates exist the oldest row wins.
        """
        result = await self.session.execute(
            select(User).where(User.username == username).order_by(User.id).limit(1)
        )
        return result.scalars().first()
