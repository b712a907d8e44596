"""Clock helpers.

Timestamps are stored naive, expressed in the zone named by ``APP_TIMEZONE``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo

from app.config import get_settings


@lru_cache(maxsize=8)
def _zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The name is read from the cached settings on every call, so
    ``reset_settings_cache`` is enough to pick up a new ``APP_TIMEZONE``.
    """

    return _zone(get_settings().app_timezone)


def local_now() -> datetime:
    """Return the current wall-clock time of the app timezone, without ``tzinfo``."""

    return datetime.now(tz=app_timezone()).replace(tzinfo=None)


def to_local_naive(value: datetime | None) -> datetime | None:
    """Express an aware ``value`` in the app timezone and drop ``tzinfo``.

    Naive values are taken as already local and returned unchanged.
    """

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(app_timezone()).replace(tzinfo=None)


def window_start(days: int, reference: datetime | None = None) -> datetime:
    """Return the start of the ``days``-long window ending at ``reference`` (now by default)."""

    end = to_local_naive(reference) or local_now()
    return end - timedelta(days=days)
