"""Domain entity representing a project delivered for a client contact."""

from dataclasses import dataclass
from datetime import datetime

from .related import RelatedEntity

PROJECT_STATUS_IN_PROGRESS = "IN_PROGRESS"
PROJECT_STATUS_COMPLETED = "COMPLETED"
PROJECT_STATUS_CANCELLED = "CANCELLED"


@dataclass
class Project:
    """Initiative tracked by its owner for one client."""

    id: int | None
    owner_id: int
    name: str
    description: str | None
    status: str
    client_id: int
    created_at: datetime
    updated_at: datetime
    client: RelatedEntity | None = None


@dataclass
class ProjectFilter:
    """Optional criteria accepted by project listings and counts."""

    status: str | None = None
    client_id: int | None = None
    created_since: datetime | None = None


__all__ = [
    "Project",
    "ProjectFilter",
    "PROJECT_STATUS_IN_PROGRESS",
    "PROJECT_STATUS_COMPLETED",
    "PROJECT_STATUS_CANCELLED",
]
