"""Use cases listing tasks by due date."""

from .list_overdue_tasks import list_overdue_tasks
from .list_upcoming_tasks import DEFAULT_UPCOMING_DAYS, list_upcoming_tasks

__all__ = ["DEFAULT_UPCOMING_DAYS", "list_overdue_tasks", "list_upcoming_tasks"]
