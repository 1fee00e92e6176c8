"""
Game repository - per-user score history.
"""

from sqlalchemy import func, select

from memequiz.db.models.game import Game
from memequiz.db.repositories.base_repository import BaseRepository


class GameRepository(BaseRepository[Game]):
    def __init__(self, session):
        super().__init__(session, Game)

    async def count_for_user(self, user_id: int) -> int:
        result = await self.session.execute(
            select(func.count(Game.id)).where(Game.user_id == user_id)
        )
        return result.scalar_one()

    async def get_history_for_user(self, user_id: int) -> list[Game]:
        """All games of a user, most recent first."""
        result = await self.session.execute(
            select(Game)
            .where(Game.user_id == user_id)
            .order_by(Game.date_played.desc(), Game.id.desc())
        )
        return list(result.scalars().all())
