"""
FastAPI dependencies - injection for the store, credential checks and the
session-bound user.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError

from memequiz.core.auth import CredentialVerifier, LocalCredentialVerifier
from memequiz.db.store import MemeStore

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


def get_store(request: Request) -> MemeStore:
    """The store opened at startup."""
    return request.app.state.store


Store = Annotated[MemeStore, Depends(get_store)]


def get_credential_verifier(store: Store) -> CredentialVerifier:
    return LocalCredentialVerifier(store)


Verifier = Annotated[CredentialVerifier, Depends(get_credential_verifier)]


async def get_current_user_id(request: Request, store: Store) -> int:
    """Resolve the session to a user id. Raises 401 if anonymous."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    try:
        user = await store.find_user_by_id(user_id)
    except SQLAlchemyError:
        logger.exception("Failed to load session user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load user",
        )
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user.id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
