"""Pydantic schemas for activity feed endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import ActivityAction, ActivityKind


class ActivityEventRead(BaseModel):
    event_id: str = Field(..., description="Identificador derivado de la actividad")
    source_id: int = Field(..., description="Identificador del registro de origen")
    source_kind: ActivityKind = Field(..., description="Tipo de entidad de origen")
    action: ActivityAction = Field(..., description="Acción reportada por el evento")
    title: str = Field(..., description="Título visible de la actividad")
    detail: str | None = Field(
        default=None, description="Descripción corta (máximo 100 caracteres)"
    )
    occurred_at: datetime = Field(..., description="Momento en el que ocurrió el evento")
    related_id: int | None = Field(
        default=None, description="Identificador de la entidad relacionada"
    )
    related_name: str | None = Field(
        default=None, description="Nombre de la entidad relacionada"
    )

    model_config = ConfigDict(from_attributes=True)


class RecentActivityRead(BaseModel):
    activities: list[ActivityEventRead] = Field(
        default_factory=list, description="Actividades ordenadas de la más reciente a la más antigua"
    )
    count: int = Field(..., description="Cantidad de actividades retornadas")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ActivityEventRead", "RecentActivityRead"]
