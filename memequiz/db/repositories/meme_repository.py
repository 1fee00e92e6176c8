"""
Meme repository - memes joined with their captions.
"""

from typing import Any, Iterable

from sqlalchemy import insert, select

from memequiz.db.models.meme import Caption, Meme, meme_captions
from memequiz.db.repositories.base_repository import BaseRepository


class MemeRepository(BaseRepository[Meme]):
    def __init__(self, session):
        super().__init__(session, Meme)

    async def get_rows_with_captions(self) -> list[Any]:
        """Flat (meme_id, url, caption_id, text, correct) rows, one per link."""
        result = await self.session.execute(
            select(
                Meme.id.label("meme_id"),
                Meme.url,
                Caption.id.label("caption_id"),
                Caption.text,
                Caption.correct,
            )
            .join(meme_captions, Meme.id == meme_captions.c.meme_id)
            .join(Caption, Caption.id == meme_captions.c.caption_id)
        )
        return list(result.all())

    async def add_with_captions(self, url: str, captions: Iterable[tuple[str, bool]]) -> Meme:
        """Insert a meme, its captions and the links between them. Caller commits."""
        meme = await self.add(Meme(url=url))
        for text, correct in captions:
            caption = Caption(text=text, correct=1 if correct else 0)
            self.session.add(caption)
            await self.session.flush()
            await self.session.execute(
                insert(meme_captions).values(meme_id=meme.id, caption_id=caption.id)
            )
        return meme
