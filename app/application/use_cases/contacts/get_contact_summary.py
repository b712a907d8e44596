"""Use case summarising the work recorded against one contact."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities import (
    CONTACT_TYPE_CLIENT,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    Contact,
    InteractionFilter,
    ProjectFilter,
    TaskFilter,
)
from app.domain.sources import ActivitySources


@dataclass
class ContactSummary:
    """Counters for a contact; project counters stay at zero for leads."""

    contact: Contact
    total_interactions: int
    last_interaction_date: datetime | None
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    total_projects: int = 0
    active_projects: int = 0
    completed_projects: int = 0


def get_contact_summary(
    sources: ActivitySources, owner_id: int, contact_id: int
) -> ContactSummary:
    """Return the summary of ``contact_id`` or raise if the owner has no such contact."""

    contact = sources.contacts.get(owner_id, contact_id)
    if contact is None:
        raise ValueError("Contacto no encontrado")

    by_contact = InteractionFilter(contact_id=contact_id)
    total_interactions = sources.interactions.count(owner_id, by_contact)
    latest = sources.interactions.list_by_owner(owner_id, by_contact, limit=1)

    total_tasks = sources.tasks.count(owner_id, TaskFilter(contact_id=contact_id))
    completed_tasks = sources.tasks.count(
        owner_id, TaskFilter(contact_id=contact_id, status=TASK_STATUS_COMPLETED)
    )

    summary = ContactSummary(
        contact=contact,
        total_interactions=total_interactions,
        last_interaction_date=latest[0].date if latest else None,
        total_tasks=total_tasks,
        completed_tasks=completed_tasks,
        pending_tasks=total_tasks - completed_tasks,
    )

    if contact.type == CONTACT_TYPE_CLIENT:
        projects = sources.projects
        summary.total_projects = projects.count(
            owner_id, ProjectFilter(client_id=contact_id)
        )
        summary.active_projects = projects.count(
            owner_id,
            ProjectFilter(client_id=contact_id, status=PROJECT_STATUS_IN_PROGRESS),
        )
        summary.completed_projects = projects.count(
            owner_id,
            ProjectFilter(client_id=contact_id, status=PROJECT_STATUS_COMPLETED),
        )

    return summary
