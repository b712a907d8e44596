"""Schemas for owner statistics endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ContactStatisticsRead(BaseModel):
    total: int = Field(..., description="Cantidad total de contactos")
    clients: int = Field(..., description="Cantidad de contactos de tipo cliente")
    leads: int = Field(..., description="Cantidad de contactos de tipo lead")
    recent: int = Field(..., description="Contactos creados en la ventana reciente")

    model_config = ConfigDict(from_attributes=True)


class TaskStatisticsRead(BaseModel):
    total: int = Field(..., description="Cantidad total de tareas")
    pending: int = Field(..., description="Cantidad de tareas pendientes")
    completed: int = Field(..., description="Cantidad de tareas completadas")
    overdue: int = Field(..., description="Tareas pendientes con fecha vencida")
    recent: int = Field(..., description="Tareas creadas en la ventana reciente")

    model_config = ConfigDict(from_attributes=True)


class ProjectStatisticsRead(BaseModel):
    total: int = Field(..., description="Cantidad total de proyectos")
    active: int = Field(..., description="Cantidad de proyectos en curso")
    completed: int = Field(..., description="Cantidad de proyectos completados")
    cancelled: int = Field(..., description="Cantidad de proyectos cancelados")
    recent: int = Field(..., description="Proyectos creados en la ventana reciente")

    model_config = ConfigDict(from_attributes=True)


class InteractionStatisticsRead(BaseModel):
    total: int = Field(..., description="Cantidad total de interacciones")
    recent: int = Field(..., description="Interacciones creadas en la ventana reciente")

    model_config = ConfigDict(from_attributes=True)


class StatisticsRead(BaseModel):
    contacts: ContactStatisticsRead
    tasks: TaskStatisticsRead
    projects: ProjectStatisticsRead
    interactions: InteractionStatisticsRead
    degraded: list[str] = Field(
        default_factory=list,
        description="Indicadores que no pudieron calcularse y se reportan en cero",
    )

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "ContactStatisticsRead",
    "InteractionStatisticsRead",
    "ProjectStatisticsRead",
    "StatisticsRead",
    "TaskStatisticsRead",
]
