"""Shared helpers for the read-only repositories."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ReadRepository:
    """Base class for repositories that only issue ``SELECT`` statements."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _reading(self, operation: str) -> Iterator[None]:
        """Roll the session back when a query fails so later queries can run."""

        try:
            yield
        except SQLAlchemyError:
            logger.debug(
                "%s.%s failed; rolling back session", type(self).__name__, operation
            )
            self.session.rollback()
            raise


__all__ = ["ReadRepository"]
