"""Rutas para consultar tareas por fecha de vencimiento."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.application.use_cases.tasks import (
    DEFAULT_UPCOMING_DAYS,
    list_overdue_tasks as list_overdue_tasks_uc,
    list_upcoming_tasks as list_upcoming_tasks_uc,
)
from app.domain.sources import ActivitySources
from app.interfaces.api.dependencies import get_activity_sources, get_current_owner_id
from app.interfaces.api.schemas import TaskRead

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/upcoming", response_model=list[TaskRead])
def read_upcoming_tasks(
    days: int = Query(
        DEFAULT_UPCOMING_DAYS,
        le=365,
        description="Días hacia adelante a considerar (valores <= 0 usan el predeterminado)",
    ),
    sources: ActivitySources = Depends(get_activity_sources),
    owner_id: int = Depends(get_current_owner_id),
) -> list[TaskRead]:
    """Devuelve las tareas pendientes que vencen en los próximos días."""

    tasks = list_upcoming_tasks_uc(sources, owner_id, days=days)
    return [TaskRead.model_validate(task) for task in tasks]


@router.get("/overdue", response_model=list[TaskRead])
def read_overdue_tasks(
    sources: ActivitySources = Depends(get_activity_sources),
    owner_id: int = Depends(get_current_owner_id),
) -> list[TaskRead]:
    """Devuelve las tareas pendientes con fecha de vencimiento pasada."""

    tasks = list_overdue_tasks_uc(sources, owner_id)
    return [TaskRead.model_validate(task) for task in tasks]


__all__ = ["router"]
