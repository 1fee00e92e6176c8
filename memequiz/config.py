"""
Configuration management using Pydantic Settings.
Defaults mirror the values the game server has always run with; any of them
can be overridden from the environment or a .env file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Checkout root; meme images live beside the package, wherever the server is started from
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Meme Quiz API"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 3001

    # Database (SQLite file)
    database_url: str = "sqlite+aiosqlite:///./database/memes.db"

    # Sessions
    secret_key: str = "change-me-in-production"
    session_cookie: str = "memequiz_session"
    session_max_age: int = 14 * 24 * 60 * 60

    # Password hashing cost factor
    bcrypt_rounds: int = 10

    # Frontend origins allowed to send credentialed requests
    cors_origins: list[str] = ["http://localhost:3000"]

    # Meme images, served as-is under /memes
    memes_dir: str = str(PROJECT_ROOT / "memes")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
