"""Persistence layer for projects."""

from __future__ import annotations

from sqlalchemy import desc, func, or_
from sqlalchemy.orm import Query

from app.domain.entities import Project, ProjectFilter, RelatedEntity
from app.infrastructure.models import ProjectModel
from app.utils import to_local_naive, window_start

from .base import ReadRepository


class ProjectRepository(ReadRepository):
    """Provide read access to the projects owned by a user."""

    def get(self, owner_id: int, project_id: int) -> Project | None:
        query = self._owned(self.session.query(ProjectModel), owner_id).filter(
            ProjectModel.id == project_id
        )
        with self._reading("get"):
            model = query.first()
        if model is None:
            return None
        return self._to_entity(model)

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Project]:
        query = self._owned(self.session.query(ProjectModel), owner_id)
        if since_days is not None:
            since = window_start(since_days)
            query = query.filter(
                or_(ProjectModel.created_at >= since, ProjectModel.updated_at >= since)
            )
        query = query.order_by(desc(ProjectModel.updated_at), desc(ProjectModel.id))
        with self._reading("list_recent"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def list_by_owner(
        self,
        owner_id: int,
        filters: ProjectFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Project]:
        query = self._owned(self.session.query(ProjectModel), owner_id)
        query = self._apply_filters(query, filters)
        query = query.order_by(desc(ProjectModel.created_at), desc(ProjectModel.id))
        if offset:
            query = query.offset(offset)
        with self._reading("list_by_owner"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def count(self, owner_id: int, filters: ProjectFilter | None = None) -> int:
        query = self._owned(self.session.query(func.count(ProjectModel.id)), owner_id)
        query = self._apply_filters(query, filters)
        with self._reading("count"):
            return int(query.scalar() or 0)

    @staticmethod
    def _owned(query: Query, owner_id: int) -> Query:
        return query.filter(
            ProjectModel.owner_id == owner_id, ProjectModel.deleted_at.is_(None)
        )

    @staticmethod
    def _apply_filters(query: Query, filters: ProjectFilter | None) -> Query:
        if filters is None:
            return query
        if filters.status:
            query = query.filter(ProjectModel.status == filters.status)
        if filters.client_id is not None:
            query = query.filter(ProjectModel.client_id == filters.client_id)
        if filters.created_since is not None:
            query = query.filter(
                ProjectModel.created_at
                >= to_local_naive(filters.created_since)
            )
        return query

    @staticmethod
    def _to_entity(model: ProjectModel) -> Project:
        client = None
        if model.client is not None:
            client = RelatedEntity(id=model.client.id, name=model.client.name)
        return Project(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            description=model.description,
            status=model.status,
            client_id=model.client_id,
            created_at=to_local_naive(model.created_at),
            updated_at=to_local_naive(model.updated_at),
            client=client,
        )


__all__ = ["ProjectRepository"]
