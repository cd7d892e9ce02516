"""
Database engine and session management.

Provides the SQLAlchemy engine and session factory. Card list persistence
is synchronous, so a plain (non-async) engine is used.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from singletonsort.config import settings
from singletonsort.models.db import Base

engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Session factory
session_factory = sessionmaker(
    engine,
    class_=Session,
    expire_on_commit=False,
)


def init_db() -> None:
    """
    Initialize database tables.

    Creates all tables defined in the ORM models.
    Should be called once at application startup.
    """
    Base.metadata.create_all(engine)


def drop_db() -> None:
    """
    Drop all database tables.

    WARNING: Destroys all data. Use only for testing.
    """
    Base.metadata.drop_all(engine)
