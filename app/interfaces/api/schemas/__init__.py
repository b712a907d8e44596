from .activity import ActivityEventRead, RecentActivityRead
from .dashboard import DashboardRead, RecentItemRead
from .records import (
    ContactRead,
    ContactSummaryRead,
    ProjectRead,
    ProjectSummaryRead,
    RelatedEntityRead,
    TaskRead,
)
from .statistics import (
    ContactStatisticsRead,
    InteractionStatisticsRead,
    ProjectStatisticsRead,
    StatisticsRead,
    TaskStatisticsRead,
)

__all__ = [
    "ActivityEventRead",
    "ContactRead",
    "ContactSummaryRead",
    "ProjectRead",
    "ProjectSummaryRead",
    "RelatedEntityRead",
    "TaskRead",
    "ContactStatisticsRead",
    "DashboardRead",
    "InteractionStatisticsRead",
    "ProjectStatisticsRead",
    "RecentActivityRead",
    "RecentItemRead",
    "StatisticsRead",
    "TaskStatisticsRead",
]
