"""
FastAPI application entry point.
Mounts the API routes, session and CORS middleware, the meme image directory
and Prometheus metrics. The lifespan opens the store and initializes its
schema before the first request is served.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import make_asgi_app
from starlette.middleware.sessions import SessionMiddleware

from memequiz import __version__
from memequiz.api.router import api_router
from memequiz.config import Settings, get_settings
from memequiz.core.logging_config import configure_logging
from memequiz.db.store import MemeStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: open the store and create missing tables. Shutdown: release connections."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info("Using database: %s", settings.database_url)
    store = MemeStore(settings.database_url, echo=settings.debug)
    await store.initialize()
    app.state.store = store
    yield
    await store.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Backend for the meme-captioning quiz game: accounts, memes with captions, scores.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Frontend runs on its own origin and sends the session cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
    )

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    # Meme images, served as-is at the URLs stored on each meme
    memes_dir = Path(settings.memes_dir)
    if memes_dir.is_dir():
        app.mount("/memes", StaticFiles(directory=str(memes_dir)), name="memes")
    else:
        logger.warning("Meme image directory %s not found; /memes is not served", memes_dir)

    return app


app = create_app()
