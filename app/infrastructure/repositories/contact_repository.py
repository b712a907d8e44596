"""Persistence layer for contacts."""

from __future__ import annotations

from sqlalchemy import desc, func, or_
from sqlalchemy.orm import Query

from app.domain.entities import Contact, ContactFilter
from app.infrastructure.models import ContactModel
from app.utils import to_local_naive, window_start

from .base import ReadRepository


class ContactRepository(ReadRepository):
    """Provide read access to the contacts owned by a user."""

    def get(self, owner_id: int, contact_id: int) -> Contact | None:
        query = self._owned(self.session.query(ContactModel), owner_id).filter(
            ContactModel.id == contact_id
        )
        with self._reading("get"):
            model = query.first()
        if model is None:
            return None
        return self._to_entity(model)

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Contact]:
        query = self._owned(self.session.query(ContactModel), owner_id)
        if since_days is not None:
            since = window_start(since_days)
            query = query.filter(
                or_(ContactModel.created_at >= since, ContactModel.updated_at >= since)
            )
        query = query.order_by(desc(ContactModel.updated_at), desc(ContactModel.id))
        with self._reading("list_recent"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def list_by_owner(
        self,
        owner_id: int,
        filters: ContactFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Contact]:
        query = self._owned(self.session.query(ContactModel), owner_id)
        query = self._apply_filters(query, filters)
        query = query.order_by(desc(ContactModel.created_at), desc(ContactModel.id))
        if offset:
            query = query.offset(offset)
        with self._reading("list_by_owner"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def count(self, owner_id: int, filters: ContactFilter | None = None) -> int:
        query = self._owned(self.session.query(func.count(ContactModel.id)), owner_id)
        query = self._apply_filters(query, filters)
        with self._reading("count"):
            return int(query.scalar() or 0)

    @staticmethod
    def _owned(query: Query, owner_id: int) -> Query:
        return query.filter(
            ContactModel.owner_id == owner_id, ContactModel.deleted_at.is_(None)
        )

    @staticmethod
    def _apply_filters(query: Query, filters: ContactFilter | None) -> Query:
        if filters is None:
            return query
        if filters.type:
            query = query.filter(ContactModel.type == filters.type)
        if filters.search:
            term = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    ContactModel.name.ilike(term),
                    ContactModel.email.ilike(term),
                    ContactModel.company.ilike(term),
                )
            )
        if filters.created_since is not None:
            query = query.filter(
                ContactModel.created_at >= to_local_naive(filters.created_since)
            )
        return query

    @staticmethod
    def _to_entity(model: ContactModel) -> Contact:
        return Contact(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            company=model.company,
            position=model.position,
            type=model.type,
            notes=model.notes,
            created_at=to_local_naive(model.created_at),
            updated_at=to_local_naive(model.updated_at),
        )


__all__ = ["ContactRepository"]
