"""Use case computing the per-owner statistics shown on the dashboard."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from app.domain.entities import (
    CONTACT_TYPE_CLIENT,
    CONTACT_TYPE_LEAD,
    PROJECT_STATUS_CANCELLED,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_PENDING,
    ContactFilter,
    InteractionFilter,
    ProjectFilter,
    TaskFilter,
)
from app.domain.sources import ActivitySources
from app.utils import local_now, to_local_naive, window_start

DEFAULT_RECENT_DAYS = 30

_logger = logging.getLogger(__name__)


@dataclass
class ContactStatistics:
    """Counters describing the owner's contacts."""

    total: int
    clients: int
    leads: int
    recent: int


@dataclass
class TaskStatistics:
    """Counters describing the owner's tasks."""

    total: int
    pending: int
    completed: int
    overdue: int
    recent: int


@dataclass
class ProjectStatistics:
    """Counters describing the owner's projects."""

    total: int
    active: int
    completed: int
    cancelled: int
    recent: int


@dataclass
class InteractionStatistics:
    """Counters describing interactions logged against the owner's contacts."""

    total: int
    recent: int


@dataclass
class StatisticsSnapshot:
    """Aggregate view of every counter, plus the names of degraded ones."""

    contacts: ContactStatistics
    tasks: TaskStatistics
    projects: ProjectStatistics
    interactions: InteractionStatistics
    degraded: list[str] = field(default_factory=list)


def get_statistics(
    sources: ActivitySources,
    owner_id: int,
    *,
    reference: datetime | None = None,
    recent_days: int = DEFAULT_RECENT_DAYS,
    logger: logging.Logger | None = None,
) -> StatisticsSnapshot:
    """Compute every counter for ``owner_id`` independently.

    Statistics are advisory: a counter whose query fails is logged, reported
    as ``0`` and listed in ``StatisticsSnapshot.degraded``. This function does
    not raise because of a source failure.
    """

    log = logger or _logger
    now = to_local_naive(reference) or local_now()
    recent_since = window_start(recent_days, now)
    degraded: list[str] = []

    def _count(name: str, call: Callable[[], int]) -> int:
        try:
            return int(call())
        except Exception:
            log.warning(
                "Statistics counter %s unavailable for owner %s; reporting 0",
                name,
                owner_id,
                exc_info=True,
            )
            degraded.append(name)
            return 0

    contacts = sources.contacts
    contact_stats = ContactStatistics(
        total=_count("contacts.total", lambda: contacts.count(owner_id)),
        clients=_count(
            "contacts.clients",
            lambda: contacts.count(owner_id, ContactFilter(type=CONTACT_TYPE_CLIENT)),
        ),
        leads=_count(
            "contacts.leads",
            lambda: contacts.count(owner_id, ContactFilter(type=CONTACT_TYPE_LEAD)),
        ),
        recent=_count(
            "contacts.recent",
            lambda: contacts.count(owner_id, ContactFilter(created_since=recent_since)),
        ),
    )

    tasks = sources.tasks
    task_stats = TaskStatistics(
        total=_count("tasks.total", lambda: tasks.count(owner_id)),
        pending=_count(
            "tasks.pending",
            lambda: tasks.count(owner_id, TaskFilter(status=TASK_STATUS_PENDING)),
        ),
        completed=_count(
            "tasks.completed",
            lambda: tasks.count(owner_id, TaskFilter(status=TASK_STATUS_COMPLETED)),
        ),
        overdue=_count(
            "tasks.overdue",
            lambda: tasks.count(owner_id, TaskFilter(overdue_at=now)),
        ),
        recent=_count(
            "tasks.recent",
            lambda: tasks.count(owner_id, TaskFilter(created_since=recent_since)),
        ),
    )

    projects = sources.projects
    project_stats = ProjectStatistics(
        total=_count("projects.total", lambda: projects.count(owner_id)),
        active=_count(
            "projects.active",
            lambda: projects.count(
                owner_id, ProjectFilter(status=PROJECT_STATUS_IN_PROGRESS)
            ),
        ),
        completed=_count(
            "projects.completed",
            lambda: projects.count(
                owner_id, ProjectFilter(status=PROJECT_STATUS_COMPLETED)
            ),
        ),
        cancelled=_count(
            "projects.cancelled",
            lambda: projects.count(
                owner_id, ProjectFilter(status=PROJECT_STATUS_CANCELLED)
            ),
        ),
        recent=_count(
            "projects.recent",
            lambda: projects.count(owner_id, ProjectFilter(created_since=recent_since)),
        ),
    )

    interactions = sources.interactions
    interaction_stats = InteractionStatistics(
        total=_count("interactions.total", lambda: interactions.count(owner_id)),
        recent=_count(
            "interactions.recent",
            lambda: interactions.count(
                owner_id, InteractionFilter(created_since=recent_since)
            ),
        ),
    )

    if degraded:
        log.info(
            "Statistics for owner %s degraded on %d counter(s): %s",
            owner_id,
            len(degraded),
            ", ".join(degraded),
        )

    return StatisticsSnapshot(
        contacts=contact_stats,
        tasks=task_stats,
        projects=project_stats,
        interactions=interaction_stats,
        degraded=degraded,
    )


__all__ = [
    "ContactStatistics",
    "DEFAULT_RECENT_DAYS",
    "InteractionStatistics",
    "ProjectStatistics",
    "StatisticsSnapshot",
    "TaskStatistics",
    "get_statistics",
]
