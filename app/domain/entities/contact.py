"""Domain entity representing a contact (client or lead) owned by a user."""

from dataclasses import dataclass
from datetime import datetime

CONTACT_TYPE_CLIENT = "CLIENT"
CONTACT_TYPE_LEAD = "LEAD"


@dataclass
class Contact:
    """Relationship record kept in the owner's address book."""

    id: int | None
    owner_id: int
    name: str
    email: str
    phone: str | None
    company: str | None
    position: str | None
    type: str
    notes: str | None
    created_at: datetime
    updated_at: datetime


@dataclass
class ContactFilter:
    """Optional criteria accepted by contact listings and counts."""

    type: str | None = None
    search: str | None = None
    created_since: datetime | None = None


__all__ = [
    "Contact",
    "ContactFilter",
    "CONTACT_TYPE_CLIENT",
    "CONTACT_TYPE_LEAD",
]
