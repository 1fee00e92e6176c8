"""
Meme endpoint - every meme with its candidate captions.
"""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from memequiz.core.dependencies import Store
from memequiz.schemas.meme import MemeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/memes", response_model=list[MemeResponse])
async def list_memes(store: Store):
    logger.info("Fetching memes")
    try:
        return await store.list_memes_with_captions()
    except SQLAlchemyError:
        logger.exception("Failed to fetch memes")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch memes",
        )
