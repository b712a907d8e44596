"""Aggregate application use cases."""

from .activity import ActivityAggregationError, get_recent_activity
from .contacts import get_contact_summary
from .dashboard import get_dashboard
from .projects import get_project_summary
from .statistics import get_statistics
from .tasks import list_overdue_tasks, list_upcoming_tasks

__all__ = [
    "ActivityAggregationError",
    "get_contact_summary",
    "get_dashboard",
    "get_project_summary",
    "get_recent_activity",
    "get_statistics",
    "list_overdue_tasks",
    "list_upcoming_tasks",
]
