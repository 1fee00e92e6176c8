"""
SQLAlchemy declarative base and metadata.
All five game tables register on Base.metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass
