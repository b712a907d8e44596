"""Domain entities describing items of recent activity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ActivityKind(str, Enum):
    """Entity family an activity event was derived from."""

    INTERACTION = "INTERACTION"
    TASK = "TASK"
    PROJECT = "PROJECT"
    CONTACT = "CONTACT"


class ActivityAction(str, Enum):
    """What happened to the record at ``occurred_at``."""

    CREATED = "CREATED"
    UPDATED = "UPDATED"
    COMPLETED = "COMPLETED"
    STARTED = "STARTED"
    CANCELLED = "CANCELLED"


@dataclass
class ActivityEvent:
    """Represents a high level event visible in the activity feed."""

    source_id: int
    source_kind: ActivityKind
    action: ActivityAction
    title: str
    occurred_at: datetime
    detail: str | None = None
    related_id: int | None = None
    related_name: str | None = None

    @property
    def event_id(self) -> str:
        """Stable key: kind, record id, action and the instant of the slot.

        A completed task reports ``COMPLETED`` twice (creation slot and
        modification slot), so the action alone does not identify an event.
        """

        return (
            f"{self.source_kind.value.lower()}-{self.source_id}-"
            f"{self.action.value.lower()}-{self.occurred_at:%Y%m%d%H%M%S}"
        )


@dataclass
class ActivityFeed:
    """Ordered, bounded list of activity events."""

    events: list[ActivityEvent] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.events)


__all__ = ["ActivityAction", "ActivityEvent", "ActivityFeed", "ActivityKind"]
