"""
Health checks - liveness of the process and readiness of the store.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError

from memequiz.core.dependencies import Store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health(request: Request):
    """Liveness: is the process up?"""
    return {"status": "ok", "app": request.app.title}


@router.get("/ready")
async def ready(store: Store):
    """Readiness: can the database answer a query?"""
    try:
        await store.ping()
    except SQLAlchemyError:
        logger.exception("Readiness check failed")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")
    return {"status": "ready"}
