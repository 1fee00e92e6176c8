"""
Game endpoints - recording finished rounds and reading them back for the
logged-in player.
"""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from memequiz.core.dependencies import CurrentUserId, Store
from memequiz.schemas.game import GameCountResponse, GameCreate, GameResponse
from memequiz.schemas.user import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _store_failure(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.post("/game", response_model=MessageResponse)
async def save_game(store: Store, data: GameCreate, user_id: CurrentUserId):
    """Record the score of a finished round."""
    try:
        await store.record_game(user_id, data.score)
    except SQLAlchemyError:
        logger.exception("Failed to save game for user %s", user_id)
        raise _store_failure("Failed to save game")
    return MessageResponse(message="Game saved")


@router.get("/user/gamecount", response_model=GameCountResponse)
async def game_count(store: Store, user_id: CurrentUserId):
    try:
        count = await store.count_games_for_user(user_id)
    except SQLAlchemyError:
        logger.exception("Failed to count games for user %s", user_id)
        raise _store_failure("Failed to fetch game count")
    return GameCountResponse(game_count=count)


@router.get("/user/history", response_model=list[GameResponse])
async def game_history(store: Store, user_id: CurrentUserId):
    """Games of the current user, most recent first."""
    try:
        games = await store.list_game_history_for_user(user_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch history for user %s", user_id)
        raise _store_failure("Failed to fetch game history")
    return [GameResponse.model_validate(g) for g in games]
