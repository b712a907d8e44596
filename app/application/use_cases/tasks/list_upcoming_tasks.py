"""Use case listing pending tasks that fall due soon."""

from __future__ import annotations

from datetime import datetime, timedelta

from app.domain.entities import TASK_STATUS_PENDING, Task, TaskFilter
from app.domain.sources import ActivitySources
from app.utils import local_now, to_local_naive

DEFAULT_UPCOMING_DAYS = 7
TASK_LISTING_LIMIT = 100


def list_upcoming_tasks(
    sources: ActivitySources,
    owner_id: int,
    *,
    days: int = DEFAULT_UPCOMING_DAYS,
    reference: datetime | None = None,
) -> list[Task]:
    """Return pending tasks due within the next ``days`` days, soonest first.

    ``days`` values below one fall back to ``DEFAULT_UPCOMING_DAYS``.
    """

    if days <= 0:
        days = DEFAULT_UPCOMING_DAYS
    now = to_local_naive(reference) or local_now()
    filters = TaskFilter(
        status=TASK_STATUS_PENDING,
        due_after=now,
        due_before=now + timedelta(days=days),
    )
    tasks = sources.tasks.list_by_owner(owner_id, filters, limit=TASK_LISTING_LIMIT)
    return sorted(tasks, key=lambda task: task.due_date)
