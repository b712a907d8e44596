"""Use case listing pending tasks whose due date has passed."""

from __future__ import annotations

from datetime import datetime

from app.domain.entities import Task, TaskFilter
from app.domain.sources import ActivitySources
from app.utils import local_now, to_local_naive

from .list_upcoming_tasks import TASK_LISTING_LIMIT


def list_overdue_tasks(
    sources: ActivitySources,
    owner_id: int,
    *,
    reference: datetime | None = None,
) -> list[Task]:
    """Return overdue tasks, the longest overdue first."""

    now = to_local_naive(reference) or local_now()
    tasks = sources.tasks.list_by_owner(
        owner_id, TaskFilter(overdue_at=now), limit=TASK_LISTING_LIMIT
    )
    return sorted(tasks, key=lambda task: task.due_date)
