"""Schemas for the dashboard endpoint."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .activity import ActivityEventRead
from .statistics import StatisticsRead


class RecentItemRead(BaseModel):
    id: int = Field(..., description="Identificador del registro")
    title: str = Field(..., description="Título o nombre visible")
    status: str = Field(..., description="Estado o tipo del registro")
    related_name: str | None = Field(
        default=None, description="Nombre de la entidad asociada"
    )
    timestamp: datetime | None = Field(
        default=None, description="Fecha relevante para el panel"
    )

    model_config = ConfigDict(from_attributes=True)


class DashboardRead(BaseModel):
    statistics: StatisticsRead
    recent_activity: list[ActivityEventRead] = Field(default_factory=list)
    recent_interactions: list[RecentItemRead] = Field(default_factory=list)
    recent_tasks: list[RecentItemRead] = Field(default_factory=list)
    recent_projects: list[RecentItemRead] = Field(default_factory=list)
    recent_contacts: list[RecentItemRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


__all__ = ["DashboardRead", "RecentItemRead"]
