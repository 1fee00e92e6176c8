"""
Account endpoints - registration, login and logout.
Login keeps only the user id in the session cookie; later requests load the
user from the store by that id.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError

from memequiz.core.dependencies import SESSION_USER_KEY, Store, Verifier
from memequiz.schemas.user import Credentials, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=MessageResponse)
async def login(request: Request, data: Credentials, verifier: Verifier):
    """Verify credentials and start a session."""
    try:
        result = await verifier.verify(data.username, data.password)
    except SQLAlchemyError:
        logger.exception("Login lookup failed for %r", data.username)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login failed",
        )
    if not result.ok:
        logger.info("Rejected login for %r: %s", data.username, result.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.message or "Invalid username or password",
        )

    request.session.clear()
    request.session[SESSION_USER_KEY] = result.user.id
    return MessageResponse(message="Logged in")


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request):
    """End the session. Anonymous callers get the same answer."""
    request.session.clear()
    return MessageResponse(message="Logged out")


@router.post("/register", response_model=MessageResponse)
async def register(store: Store, data: Credentials):
    """Create a user. Duplicate usernames are not rejected."""
    try:
        await store.create_user(data.username, data.password)
    except SQLAlchemyError:
        logger.exception("Registration failed for %r", data.username)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed",
        )
    return MessageResponse(message="Registered")
