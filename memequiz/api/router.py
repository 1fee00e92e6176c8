"""
API router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from memequiz.api.endpoints import auth, games, health, memes

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(memes.router, tags=["memes"])
api_router.include_router(games.router, tags=["games"])
