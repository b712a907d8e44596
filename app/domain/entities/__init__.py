"""Domain entities exposed by the application."""

from .activity_event import ActivityAction, ActivityEvent, ActivityFeed, ActivityKind
from .contact import CONTACT_TYPE_CLIENT, CONTACT_TYPE_LEAD, Contact, ContactFilter
from .interaction import (
    INTERACTION_TYPE_CALL,
    INTERACTION_TYPE_EMAIL,
    INTERACTION_TYPE_MEETING,
    INTERACTION_TYPE_OTHER,
    Interaction,
    InteractionFilter,
)
from .project import (
    PROJECT_STATUS_CANCELLED,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    Project,
    ProjectFilter,
)
from .related import RelatedEntity
from .task import (
    TASK_PRIORITY_HIGH,
    TASK_PRIORITY_LOW,
    TASK_PRIORITY_MEDIUM,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_PENDING,
    Task,
    TaskFilter,
)

__all__ = [
    "ActivityAction",
    "ActivityEvent",
    "ActivityFeed",
    "ActivityKind",
    "Contact",
    "ContactFilter",
    "CONTACT_TYPE_CLIENT",
    "CONTACT_TYPE_LEAD",
    "Interaction",
    "InteractionFilter",
    "INTERACTION_TYPE_CALL",
    "INTERACTION_TYPE_EMAIL",
    "INTERACTION_TYPE_MEETING",
    "INTERACTION_TYPE_OTHER",
    "Project",
    "ProjectFilter",
    "PROJECT_STATUS_CANCELLED",
    "PROJECT_STATUS_COMPLETED",
    "PROJECT_STATUS_IN_PROGRESS",
    "RelatedEntity",
    "Task",
    "TaskFilter",
    "TASK_PRIORITY_HIGH",
    "TASK_PRIORITY_LOW",
    "TASK_PRIORITY_MEDIUM",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUS_PENDING",
]
