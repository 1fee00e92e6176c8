# Repository pattern: one class per aggregate, all sharing an AsyncSession

from memequiz.db.repositories.game_repository import GameRepository
from memequiz.db.repositories.meme_repository import MemeRepository
from memequiz.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "MemeRepository", "GameRepository"]
