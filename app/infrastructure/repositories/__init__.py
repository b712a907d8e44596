"""Repository implementations for infrastructure layer."""

from .contact_repository import ContactRepository
from .interaction_repository import InteractionRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository

__all__ = [
    "ContactRepository",
    "InteractionRepository",
    "ProjectRepository",
    "TaskRepository",
]
