"""Use case computing task progress for a project."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities import TASK_STATUS_COMPLETED, Project, TaskFilter
from app.domain.sources import ActivitySources
from app.utils import local_now, to_local_naive


@dataclass
class ProjectSummary:
    project: Project
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    overdue_tasks: int
    progress: float


def get_project_summary(
    sources: ActivitySources,
    owner_id: int,
    project_id: int,
    *,
    reference: datetime | None = None,
) -> ProjectSummary:
    """Return task counters for ``project_id`` and its completion percentage.

    ``progress`` is the share of completed tasks in percent, ``0.0`` for a
    project without tasks.
    """

    project = sources.projects.get(owner_id, project_id)
    if project is None:
        raise ValueError("Proyecto no encontrado")

    now = to_local_naive(reference) or local_now()
    tasks = sources.tasks
    total = tasks.count(owner_id, TaskFilter(project_id=project_id))
    completed = tasks.count(
        owner_id, TaskFilter(project_id=project_id, status=TASK_STATUS_COMPLETED)
    )
    overdue = tasks.count(owner_id, TaskFilter(project_id=project_id, overdue_at=now))

    return ProjectSummary(
        project=project,
        total_tasks=total,
        completed_tasks=completed,
        pending_tasks=total - completed,
        overdue_tasks=overdue,
        progress=completed / total * 100 if total else 0.0,
    )
