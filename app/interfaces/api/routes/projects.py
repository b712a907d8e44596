"""Rutas de consulta agregada sobre proyectos."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.use_cases.projects import get_project_summary as get_project_summary_uc
from app.domain.sources import ActivitySources
from app.interfaces.api.dependencies import get_activity_sources, get_current_owner_id
from app.interfaces.api.schemas import ProjectSummaryRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("/{project_id}/summary", response_model=ProjectSummaryRead)
def read_project_summary(
    project_id: int,
    sources: ActivitySources = Depends(get_activity_sources),
    owner_id: int = Depends(get_current_owner_id),
) -> ProjectSummaryRead:
    """Devuelve el avance de tareas de un proyecto."""

    try:
        summary = get_project_summary_uc(sources, owner_id, project_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ProjectSummaryRead.model_validate(summary)


__all__ = ["router"]
