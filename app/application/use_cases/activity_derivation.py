"""Turn raw contact, interaction, task and project records into activity events.

Every record yields a creation-slot event. A second event is synthesized only
when the record was modified more than ``UPDATE_GUARD`` after it was created;
closer timestamps are insert-then-save jitter, not a real update.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Union

from app.domain.entities import (
    PROJECT_STATUS_CANCELLED,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    ActivityAction,
    ActivityEvent,
    ActivityKind,
    Contact,
    Interaction,
    Project,
    RelatedEntity,
    Task,
)

ActivityRecord = Union[Interaction, Task, Project, Contact]

UPDATE_GUARD = timedelta(minutes=1)
DETAIL_MAX_LENGTH = 100
ELLIPSIS = "..."

TITLE_PLACEHOLDERS: dict[ActivityKind, str] = {
    ActivityKind.INTERACTION: "Untitled interaction",
    ActivityKind.TASK: "Untitled task",
    ActivityKind.PROJECT: "Untitled project",
    ActivityKind.CONTACT: "Unnamed contact",
}

_PROJECT_TRANSITIONS: dict[str, ActivityAction] = {
    PROJECT_STATUS_IN_PROGRESS: ActivityAction.STARTED,
    PROJECT_STATUS_COMPLETED: ActivityAction.COMPLETED,
    PROJECT_STATUS_CANCELLED: ActivityAction.CANCELLED,
}


def truncate_detail(text: str, max_length: int = DETAIL_MAX_LENGTH) -> str:
    """Cut ``text`` to ``max_length`` characters, ending with ``...`` when cut."""

    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def display_title(kind: ActivityKind, value: str | None) -> str:
    """Return ``value`` or the placeholder for ``kind`` when it is blank."""

    if value and value.strip():
        return value
    return TITLE_PLACEHOLDERS[kind]


def was_modified(created_at: datetime, updated_at: datetime) -> bool:
    return updated_at > created_at + UPDATE_GUARD


def _detail(text: str | None) -> str | None:
    if not text:
        return None
    return truncate_detail(text)


def _related(*candidates: RelatedEntity | None) -> tuple[int | None, str | None]:
    """Return the first loaded association that has a display name."""

    for candidate in candidates:
        if candidate is not None and candidate.name:
            return candidate.id, candidate.name
    return None, None


def _event(
    kind: ActivityKind,
    source_id: int,
    action: ActivityAction,
    title: str,
    occurred_at: datetime,
    detail: str | None,
    related: tuple[int | None, str | None],
) -> ActivityEvent:
    related_id, related_name = related
    return ActivityEvent(
        source_id=source_id,
        source_kind=kind,
        action=action,
        title=title,
        occurred_at=occurred_at,
        detail=detail,
        related_id=related_id,
        related_name=related_name,
    )


def derive_interaction_events(interaction: Interaction) -> list[ActivityEvent]:
    kind = ActivityKind.INTERACTION
    title = display_title(kind, interaction.subject)
    detail = _detail(interaction.description)
    related = _related(interaction.contact)

    events = [
        _event(
            kind,
            interaction.id,
            ActivityAction.CREATED,
            title,
            interaction.created_at,
            detail,
            related,
        )
    ]
    if was_modified(interaction.created_at, interaction.updated_at):
        events.append(
            _event(
                kind,
                interaction.id,
                ActivityAction.UPDATED,
                title,
                interaction.updated_at,
                detail,
                related,
            )
        )
    return events


def derive_task_events(task: Task) -> list[ActivityEvent]:
    """Derive the events of a task.

    A task that is already completed reports ``COMPLETED`` in its creation
    slot. A later modification adds ``UPDATED`` and, for completed tasks, a
    second ``COMPLETED`` at the same instant.
    """

    kind = ActivityKind.TASK
    title = display_title(kind, task.title)
    detail = _detail(task.description)
    related = _related(task.contact, task.project)
    completed = task.is_completed()

    initial_action = ActivityAction.COMPLETED if completed else ActivityAction.CREATED
    events = [
        _event(kind, task.id, initial_action, title, task.created_at, detail, related)
    ]
    if was_modified(task.created_at, task.updated_at):
        events.append(
            _event(
                kind,
                task.id,
                ActivityAction.UPDATED,
                title,
                task.updated_at,
                detail,
                related,
            )
        )
        if completed:
            events.append(
                _event(
                    kind,
                    task.id,
                    ActivityAction.COMPLETED,
                    title,
                    task.updated_at,
                    detail,
                    related,
                )
            )
    return events


def derive_project_events(project: Project) -> list[ActivityEvent]:
    kind = ActivityKind.PROJECT
    title = display_title(kind, project.name)
    detail = _detail(project.description)
    related = _related(project.client)

    events = [
        _event(
            kind,
            project.id,
            ActivityAction.CREATED,
            title,
            project.created_at,
            detail,
            related,
        )
    ]
    if was_modified(project.created_at, project.updated_at):
        action = _PROJECT_TRANSITIONS.get(project.status, ActivityAction.UPDATED)
        events.append(
            _event(kind, project.id, action, title, project.updated_at, detail, related)
        )
    return events


def derive_contact_events(contact: Contact) -> list[ActivityEvent]:
    kind = ActivityKind.CONTACT
    title = display_title(kind, contact.name)
    detail = _detail(contact.notes)
    related = (None, None)

    events = [
        _event(
            kind,
            contact.id,
            ActivityAction.CREATED,
            title,
            contact.created_at,
            detail,
            related,
        )
    ]
    if was_modified(contact.created_at, contact.updated_at):
        events.append(
            _event(
                kind,
                contact.id,
                ActivityAction.UPDATED,
                title,
                contact.updated_at,
                detail,
                related,
            )
        )
    return events


_DERIVERS: dict[type, Callable[..., list[ActivityEvent]]] = {
    Interaction: derive_interaction_events,
    Task: derive_task_events,
    Project: derive_project_events,
    Contact: derive_contact_events,
}


def derive_events(record: ActivityRecord) -> list[ActivityEvent]:
    """Dispatch ``record`` to the derivation function of its entity type."""

    try:
        derive = _DERIVERS[type(record)]
    except KeyError:
        raise TypeError(
            f"No activity derivation registered for {type(record).__name__}"
        ) from None
    return derive(record)


__all__ = [
    "ActivityRecord",
    "DETAIL_MAX_LENGTH",
    "TITLE_PLACEHOLDERS",
    "UPDATE_GUARD",
    "derive_contact_events",
    "derive_events",
    "derive_interaction_events",
    "derive_project_events",
    "derive_task_events",
    "display_title",
    "truncate_detail",
    "was_modified",
]
