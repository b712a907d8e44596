"""Domain entity representing a communication logged against a contact."""

from dataclasses import dataclass
from datetime import datetime

from .related import RelatedEntity

INTERACTION_TYPE_EMAIL = "EMAIL"
INTERACTION_TYPE_CALL = "CALL"
INTERACTION_TYPE_MEETING = "MEETING"
INTERACTION_TYPE_OTHER = "OTHER"


@dataclass
class Interaction:
    """An email, call, meeting or other touch point with a contact."""

    id: int | None
    contact_id: int
    type: str
    date: datetime
    subject: str | None
    description: str | None
    created_at: datetime
    updated_at: datetime
    contact: RelatedEntity | None = None


@dataclass
class InteractionFilter:
    """Optional criteria accepted by interaction listings and counts."""

    type: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    contact_id: int | None = None
    created_since: datetime | None = None


__all__ = [
    "Interaction",
    "InteractionFilter",
    "INTERACTION_TYPE_EMAIL",
    "INTERACTION_TYPE_CALL",
    "INTERACTION_TYPE_MEETING",
    "INTERACTION_TYPE_OTHER",
]
