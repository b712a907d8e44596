"""Shared pytest configuration.

The application reads its settings from the environment at import time, so
the variables are set here before any ``app`` module is imported.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

TEST_DB_PATH = Path(tempfile.gettempdir()) / "crm_activity_api_test.db"

os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ.pop("ACTIVITY_LOOKBACK_DAYS", None)

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

import pytest  # noqa: E402


@pytest.fixture
def reset_database():
    """Give the test a freshly created SQLite schema."""

    from app.infrastructure.database import Base, engine, initialize_database

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(reset_database):
    from app.infrastructure.database import SessionLocal

    with SessionLocal() as session:
        yield session
