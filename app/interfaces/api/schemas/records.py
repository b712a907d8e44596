"""Read schemas for contacts, projects and tasks."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RelatedEntityRead(BaseModel):
    id: int = Field(..., description="Identificador de la entidad relacionada")
    name: str = Field(..., description="Nombre visible de la entidad relacionada")

    model_config = ConfigDict(from_attributes=True)


class ContactRead(BaseModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    company: str | None = None
    position: str | None = None
    type: str = Field(..., description="CLIENT o LEAD")
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProjectRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    status: str = Field(..., description="IN_PROGRESS, COMPLETED o CANCELLED")
    client_id: int
    client: RelatedEntityRead | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskRead(BaseModel):
    id: int
    title: str
    description: str | None = None
    due_date: datetime | None = None
    priority: str
    status: str
    contact: RelatedEntityRead | None = None
    project: RelatedEntityRead | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ContactSummaryRead(BaseModel):
    contact: ContactRead
    total_interactions: int = Field(..., description="Interacciones registradas con el contacto")
    last_interaction_date: datetime | None = Field(
        default=None, description="Fecha de la última interacción"
    )
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    total_projects: int = Field(0, description="Proyectos del cliente (cero para leads)")
    active_projects: int = 0
    completed_projects: int = 0

    model_config = ConfigDict(from_attributes=True)


class ProjectSummaryRead(BaseModel):
    project: ProjectRead
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    overdue_tasks: int = Field(..., description="Tareas pendientes con fecha vencida")
    progress: float = Field(..., description="Porcentaje de tareas completadas (0-100)")

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "ContactRead",
    "ContactSummaryRead",
    "ProjectRead",
    "ProjectSummaryRead",
    "RelatedEntityRead",
    "TaskRead",
]
