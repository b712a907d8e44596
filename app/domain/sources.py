"""Contracts the activity engine expects from its entity data sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from app.domain.entities import (
    Contact,
    ContactFilter,
    Interaction,
    InteractionFilter,
    Project,
    ProjectFilter,
    Task,
    TaskFilter,
)


class InteractionSource(Protocol):
    """Read access to the interactions logged against an owner's contacts."""

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Interaction]:
        """Return interactions created or modified within ``since_days``."""
        ...

    def list_by_owner(
        self,
        owner_id: int,
        filters: InteractionFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Interaction]:
        """Return interactions matching ``filters``."""
        ...

    def count(self, owner_id: int, filters: InteractionFilter | None = None) -> int:
        """Return how many interactions match ``filters``."""
        ...


class TaskSource(Protocol):
    """Read access to an owner's tasks."""

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Task]:
        ...

    def list_by_owner(
        self,
        owner_id: int,
        filters: TaskFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Task]:
        ...

    def count(self, owner_id: int, filters: TaskFilter | None = None) -> int:
        ...


class ProjectSource(Protocol):
    """Read access to an owner's projects."""

    def get(self, owner_id: int, project_id: int) -> Project | None:
        """Return the project when it exists and belongs to ``owner_id``."""
        ...

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Project]:
        ...

    def list_by_owner(
        self,
        owner_id: int,
        filters: ProjectFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Project]:
        ...

    def count(self, owner_id: int, filters: ProjectFilter | None = None) -> int:
        ...


class ContactSource(Protocol):
    """Read access to an owner's contacts."""

    def get(self, owner_id: int, contact_id: int) -> Contact | None:
        """Return the contact when it exists and belongs to ``owner_id``."""
        ...

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Contact]:
        ...

    def list_by_owner(
        self,
        owner_id: int,
        filters: ContactFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Contact]:
        ...

    def count(self, owner_id: int, filters: ContactFilter | None = None) -> int:
        ...


@dataclass
class ActivitySources:
    """The four independent sources consulted by the activity engine."""

    interactions: InteractionSource
    tasks: TaskSource
    projects: ProjectSource
    contacts: ContactSource


__all__ = [
    "ActivitySources",
    "ContactSource",
    "InteractionSource",
    "ProjectSource",
    "TaskSource",
]
