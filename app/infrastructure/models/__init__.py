"""ORM models used by the application infrastructure."""

from .contact import ContactModel
from .interaction import InteractionModel
from .project import ProjectModel
from .task import TaskModel

__all__ = [
    "ContactModel",
    "InteractionModel",
    "ProjectModel",
    "TaskModel",
]
