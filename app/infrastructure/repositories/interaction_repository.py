"""Persistence layer for interactions.

Interactions carry no owner column; they belong to whoever owns the contact
they were logged against, so every query joins through ``contact``.
"""

from __future__ import annotations

from sqlalchemy import desc, func, or_
from sqlalchemy.orm import Query

from app.domain.entities import Interaction, InteractionFilter, RelatedEntity
from app.infrastructure.models import ContactModel, InteractionModel
from app.utils import to_local_naive, window_start

from .base import ReadRepository


class InteractionRepository(ReadRepository):
    """Provide read access to the interactions of an owner's contacts."""

    def list_recent(
        self, owner_id: int, *, since_days: int | None, limit: int
    ) -> list[Interaction]:
        query = self._owned(self.session.query(InteractionModel), owner_id)
        if since_days is not None:
            since = window_start(since_days)
            query = query.filter(
                or_(
                    InteractionModel.created_at >= since,
                    InteractionModel.updated_at >= since,
                )
            )
        query = query.order_by(
            desc(InteractionModel.updated_at), desc(InteractionModel.id)
        )
        with self._reading("list_recent"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def list_by_owner(
        self,
        owner_id: int,
        filters: InteractionFilter | None = None,
        *,
        limit: int,
        offset: int = 0,
    ) -> list[Interaction]:
        query = self._owned(self.session.query(InteractionModel), owner_id)
        query = self._apply_filters(query, filters)
        query = query.order_by(desc(InteractionModel.date), desc(InteractionModel.id))
        if offset:
            query = query.offset(offset)
        with self._reading("list_by_owner"):
            models = query.limit(limit).all()
        return [self._to_entity(model) for model in models]

    def count(self, owner_id: int, filters: InteractionFilter | None = None) -> int:
        query = self._owned(
            self.session.query(func.count(InteractionModel.id)).select_from(
                InteractionModel
            ),
            owner_id,
        )
        query = self._apply_filters(query, filters)
        with self._reading("count"):
            return int(query.scalar() or 0)

    @staticmethod
    def _owned(query: Query, owner_id: int) -> Query:
        return query.join(
            ContactModel, InteractionModel.contact_id == ContactModel.id
        ).filter(
            ContactModel.owner_id == owner_id,
            ContactModel.deleted_at.is_(None),
            InteractionModel.deleted_at.is_(None),
        )

    @staticmethod
    def _apply_filters(query: Query, filters: InteractionFilter | None) -> Query:
        if filters is None:
            return query
        if filters.type:
            query = query.filter(InteractionModel.type == filters.type)
        if filters.date_from is not None:
            query = query.filter(
                InteractionModel.date >= to_local_naive(filters.date_from)
            )
        if filters.date_to is not None:
            query = query.filter(
                InteractionModel.date <= to_local_naive(filters.date_to)
            )
        if filters.contact_id is not None:
            query = query.filter(InteractionModel.contact_id == filters.contact_id)
        if filters.created_since is not None:
            query = query.filter(
                InteractionModel.created_at
                >= to_local_naive(filters.created_since)
            )
        return query

    @staticmethod
    def _to_entity(model: InteractionModel) -> Interaction:
        contact = None
        if model.contact is not None:
            contact = RelatedEntity(id=model.contact.id, name=model.contact.name)
        return Interaction(
            id=model.id,
            contact_id=model.contact_id,
            type=model.type,
            date=to_local_naive(model.date),
            subject=model.subject,
            description=model.description,
            created_at=to_local_naive(model.created_at),
            updated_at=to_local_naive(model.updated_at),
            contact=contact,
        )


__all__ = ["InteractionRepository"]
