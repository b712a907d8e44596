"""Domain entity representing a task assigned to its owner."""

from dataclasses import dataclass
from datetime import datetime

from .related import RelatedEntity

TASK_STATUS_PENDING = "PENDING"
TASK_STATUS_COMPLETED = "COMPLETED"

TASK_PRIORITY_LOW = "LOW"
TASK_PRIORITY_MEDIUM = "MEDIUM"
TASK_PRIORITY_HIGH = "HIGH"


@dataclass
class Task:
    """Work item optionally linked to a contact and/or a project."""

    id: int | None
    owner_id: int
    title: str
    description: str | None
    due_date: datetime | None
    priority: str
    status: str
    contact_id: int | None
    project_id: int | None
    created_at: datetime
    updated_at: datetime
    contact: RelatedEntity | None = None
    project: RelatedEntity | None = None

    def is_completed(self) -> bool:
        return self.status == TASK_STATUS_COMPLETED


@dataclass
class TaskFilter:
    """Optional criteria accepted by task listings and counts.

    ``overdue_at`` restricts the selection to pending tasks whose due date is
    before the given instant.
    """

    status: str | None = None
    priority: str | None = None
    contact_id: int | None = None
    project_id: int | None = None
    due_before: datetime | None = None
    due_after: datetime | None = None
    created_since: datetime | None = None
    overdue_at: datetime | None = None


__all__ = [
    "Task",
    "TaskFilter",
    "TASK_STATUS_PENDING",
    "TASK_STATUS_COMPLETED",
    "TASK_PRIORITY_LOW",
    "TASK_PRIORITY_MEDIUM",
    "TASK_PRIORITY_HIGH",
]
