"""Use case composing the dashboard shown after login."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import TypeVar

from app.domain.entities import (
    PROJECT_STATUS_IN_PROGRESS,
    TASK_STATUS_PENDING,
    ActivityEvent,
    ActivityKind,
    Contact,
    Interaction,
    Project,
    ProjectFilter,
    RelatedEntity,
    Task,
    TaskFilter,
)
from app.domain.sources import ActivitySources

from .activity import get_recent_activity
from .activity_derivation import display_title
from .statistics import DEFAULT_RECENT_DAYS, StatisticsSnapshot, get_statistics

DASHBOARD_ACTIVITY_LIMIT = 10
DASHBOARD_RECENT_ITEMS_LIMIT = 5

RecordT = TypeVar("RecordT")

_logger = logging.getLogger(__name__)


@dataclass
class RecentItem:
    """Display-only projection of a record listed on the dashboard."""

    id: int
    title: str
    status: str
    related_name: str | None
    timestamp: datetime | None


@dataclass
class DashboardSnapshot:
    """Everything the dashboard renders, computed for a single request."""

    statistics: StatisticsSnapshot
    recent_activity: list[ActivityEvent] = field(default_factory=list)
    recent_interactions: list[RecentItem] = field(default_factory=list)
    recent_tasks: list[RecentItem] = field(default_factory=list)
    recent_projects: list[RecentItem] = field(default_factory=list)
    recent_contacts: list[RecentItem] = field(default_factory=list)


def _display_name(entity: RelatedEntity | None) -> str | None:
    if entity is None:
        return None
    return entity.name or None


def _interaction_item(interaction: Interaction) -> RecentItem:
    return RecentItem(
        id=interaction.id,
        title=display_title(ActivityKind.INTERACTION, interaction.subject),
        status=interaction.type,
        related_name=_display_name(interaction.contact),
        timestamp=interaction.date,
    )


def _task_item(task: Task) -> RecentItem:
    related = task.contact if task.contact and task.contact.name else task.project
    return RecentItem(
        id=task.id,
        title=display_title(ActivityKind.TASK, task.title),
        status=task.status,
        related_name=_display_name(related),
        timestamp=task.due_date or task.created_at,
    )


def _project_item(project: Project) -> RecentItem:
    return RecentItem(
        id=project.id,
        title=display_title(ActivityKind.PROJECT, project.name),
        status=project.status,
        related_name=_display_name(project.client),
        timestamp=project.updated_at,
    )


def _contact_item(contact: Contact) -> RecentItem:
    return RecentItem(
        id=contact.id,
        title=display_title(ActivityKind.CONTACT, contact.name),
        status=contact.type,
        related_name=contact.company or None,
        timestamp=contact.created_at,
    )


def _recent_items(
    section: str,
    fetch: Callable[[], Sequence[RecordT]],
    project: Callable[[RecordT], RecentItem],
    *,
    owner_id: int,
    logger: logging.Logger,
) -> list[RecentItem]:
    """Return the projected records of one panel, or ``[]`` when it fails."""

    try:
        return [project(record) for record in fetch()]
    except Exception:
        logger.warning(
            "Dashboard section %s unavailable for owner %s; rendering it empty",
            section,
            owner_id,
            exc_info=True,
        )
        return []


def get_dashboard(
    sources: ActivitySources,
    owner_id: int,
    *,
    reference: datetime | None = None,
    recent_days: int = DEFAULT_RECENT_DAYS,
    since_days: int | None = None,
    logger: logging.Logger | None = None,
) -> DashboardSnapshot:
    """Assemble statistics, recent activity and the four recent-item panels.

    Statistics and recent activity keep their own failure policies (degraded
    counters, aggregation error). A failing recent-item panel is rendered
    empty without affecting the rest of the dashboard.
    """

    log = logger or _logger

    statistics = get_statistics(
        sources, owner_id, reference=reference, recent_days=recent_days, logger=log
    )
    feed = get_recent_activity(
        sources,
        owner_id,
        limit=DASHBOARD_ACTIVITY_LIMIT,
        since_days=since_days,
        logger=log,
    )

    limit = DASHBOARD_RECENT_ITEMS_LIMIT
    recent_interactions = _recent_items(
        "recent_interactions",
        lambda: sources.interactions.list_by_owner(owner_id, limit=limit),
        _interaction_item,
        owner_id=owner_id,
        logger=log,
    )
    recent_tasks = _recent_items(
        "recent_tasks",
        lambda: sources.tasks.list_by_owner(
            owner_id, TaskFilter(status=TASK_STATUS_PENDING), limit=limit
        ),
        _task_item,
        owner_id=owner_id,
        logger=log,
    )
    recent_projects = _recent_items(
        "recent_projects",
        lambda: sources.projects.list_by_owner(
            owner_id, ProjectFilter(status=PROJECT_STATUS_IN_PROGRESS), limit=limit
        ),
        _project_item,
        owner_id=owner_id,
        logger=log,
    )
    recent_contacts = _recent_items(
        "recent_contacts",
        lambda: sources.contacts.list_by_owner(owner_id, limit=limit),
        _contact_item,
        owner_id=owner_id,
        logger=log,
    )

    return DashboardSnapshot(
        statistics=statistics,
        recent_activity=feed.events,
        recent_interactions=recent_interactions,
        recent_tasks=recent_tasks,
        recent_projects=recent_projects,
        recent_contacts=recent_contacts,
    )


__all__ = [
    "DASHBOARD_ACTIVITY_LIMIT",
    "DASHBOARD_RECENT_ITEMS_LIMIT",
    "DashboardSnapshot",
    "RecentItem",
    "get_dashboard",
]
