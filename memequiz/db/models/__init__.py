from memequiz.db.models.game import Game
from memequiz.db.models.meme import Caption, Meme, meme_captions
from memequiz.db.models.user import User

__all__ = ["User", "Meme", "Caption", "meme_captions", "Game"]
