"""Persistence layer for tasks."""

from __future__ import annotations

from sqlalchemy import case, desc, func, or_
from sqlalchemy.orm import Query

from app.domain.entities import (
    TASK_PRIORITY_HIGH,
    TASK_PRIORITY_MEDIUM,
    TASK_STATUS_PENDING,
    RelatedEntity,
    Task,
    TaskFilter,
)
from app.infrastructure.models import TaskModel
from app.utils import to_local_naive, window_start

from .base import ReadRepository

_PRIORITY_RANK = case(
    (TaskModel.priority == TASK_PRIORITY_HIGH, 1),
    (TaskModel.priority == TASK_PRIORITY_MEDIUM, 2),
    else_=3,
)


class TaskRepository(ReadRepository):
    """Provide read access to the tasks owned by a user."""

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Task]:
        query = self._owned(self.session.query(TaskModel), owner_id)
        if since_days is not None:
            since = window_start(since_days)
            query = query.filter(
                or_(TaskModel.created_at >= since, TaskModel.updated_at >= since)
            )
        query = query.order_by(desc(TaskModel.updated_at), desc(TaskModel.id))
        with self._reading("list_recent"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def list_by_owner(
        self,
        owner_id: int,
        filters: TaskFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Task]:
        """Return tasks by priority, then earliest due date (undated last)."""

        query = self._owned(self.session.query(TaskModel), owner_id)
        query = self._apply_filters(query, filters)
        query = query.order_by(
            _PRIORITY_RANK,
            TaskModel.due_date.is_(None),
            TaskModel.due_date.asc(),
            desc(TaskModel.id),
        )
        if offset:
            query = query.offset(offset)
        with self._reading("list_by_owner"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def count(self, owner_id: int, filters: TaskFilter | None = None) -> int:
        query = self._owned(self.session.query(func.count(TaskModel.id)), owner_id)
        query = self._apply_filters(query, filters)
        with self._reading("count"):
            return int(query.scalar() or 0)

    @staticmethod
    def _owned(query: Query, owner_id: int) -> Query:
        return query.filter(
            TaskModel.owner_id == owner_id, TaskModel.deleted_at.is_(None)
        )

    @staticmethod
    def _apply_filters(query: Query, filters: TaskFilter | None) -> Query:
        if filters is None:
            return query
        if filters.status:
            query = query.filter(TaskModel.status == filters.status)
        if filters.priority:
            query = query.filter(TaskModel.priority == filters.priority)
        if filters.contact_id is not None:
            query = query.filter(TaskModel.contact_id == filters.contact_id)
        if filters.project_id is not None:
            query = query.filter(TaskModel.project_id == filters.project_id)
        if filters.due_before is not None:
            query = query.filter(
                TaskModel.due_date <= to_local_naive(filters.due_before)
            )
        if filters.due_after is not None:
            query = query.filter(
                TaskModel.due_date >= to_local_naive(filters.due_after)
            )
        if filters.created_since is not None:
            query = query.filter(
                TaskModel.created_at >= to_local_naive(filters.created_since)
            )
        if filters.overdue_at is not None:
            query = query.filter(
                TaskModel.status == TASK_STATUS_PENDING,
                TaskModel.due_date.isnot(None),
                TaskModel.due_date < to_local_naive(filters.overdue_at),
            )
        return query

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        contact = None
        if model.contact is not None:
            contact = RelatedEntity(id=model.contact.id, name=model.contact.name)
        project = None
        if model.project is not None:
            project = RelatedEntity(id=model.project.id, name=model.project.name)
        return Task(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            description=model.description,
            due_date=to_local_naive(model.due_date),
            priority=model.priority,
            status=model.status,
            contact_id=model.contact_id,
            project_id=model.project_id,
            created_at=to_local_naive(model.created_at),
            updated_at=to_local_naive(model.updated_at),
            contact=contact,
            project=project,
        )


__all__ = ["TaskRepository"]
