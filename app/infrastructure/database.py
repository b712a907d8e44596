"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict[str, object]:
    """Return driver specific keyword arguments for ``create_engine``."""

    options: dict[str, object] = {"pool_pre_ping": True}
    if make_url(database_url).get_backend_name() == "sqlite":
        # FastAPI serves sync endpoints from a thread pool.
        options["connect_args"] = {"check_same_thread": False}
    return options


database_url = settings.database_url
engine = create_engine(database_url, **_engine_options(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from app.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.debug("Database schema verified for %s", engine.url.render_as_string())


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
