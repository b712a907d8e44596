"""Lightweight reference to an entity associated with a record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RelatedEntity:
    """Identifier and display name of an eagerly loaded association."""

    id: int
    name: str | None


__all__ = ["RelatedEntity"]
