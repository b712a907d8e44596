"""Rutas de consulta agregada sobre contactos."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.use_cases.contacts import get_contact_summary as get_contact_summary_uc
from app.domain.sources import ActivitySources
from app.interfaces.api.dependencies import get_activity_sources, get_current_owner_id
from app.interfaces.api.schemas import ContactSummaryRead

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("/{contact_id}/summary", response_model=ContactSummaryRead)
def read_contact_summary(
    contact_id: int,
    sources: ActivitySources = Depends(get_activity_sources),
    owner_id: int = Depends(get_current_owner_id),
) -> ContactSummaryRead:
    """Devuelve interacciones, tareas y proyectos asociados a un contacto."""

    try:
        summary = get_contact_summary_uc(sources, owner_id, contact_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ContactSummaryRead.model_validate(summary)


__all__ = ["router"]
