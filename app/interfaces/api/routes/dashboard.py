"""Rutas para obtener el tablero y las estadísticas del usuario."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.application.use_cases.activity import ActivityAggregationError
from app.application.use_cases.dashboard import DashboardSnapshot, get_dashboard
from app.application.use_cases.statistics import StatisticsSnapshot, get_statistics
from app.config import Settings, get_settings
from app.domain.sources import ActivitySources
from app.interfaces.api.dependencies import get_activity_sources, get_current_owner_id
from app.interfaces.api.routes_helpers import activity_unavailable
from app.interfaces.api.schemas import DashboardRead, StatisticsRead

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

logger = logging.getLogger(__name__)


def _dashboard_to_read_model(snapshot: DashboardSnapshot) -> DashboardRead:
    return DashboardRead.model_validate(snapshot)


def _statistics_to_read_model(snapshot: StatisticsSnapshot) -> StatisticsRead:
    return StatisticsRead.model_validate(snapshot)


@router.get("/", response_model=DashboardRead)
def read_dashboard(
    sources: ActivitySources = Depends(get_activity_sources),
    owner_id: int = Depends(get_current_owner_id),
    settings: Settings = Depends(get_settings),
) -> DashboardRead:
    """Devuelve estadísticas, actividad reciente y los paneles de registros recientes."""

    try:
        snapshot = get_dashboard(
            sources,
            owner_id,
            recent_days=settings.stats_recent_days,
            since_days=settings.activity_lookback_days,
            logger=logger,
        )
    except ActivityAggregationError as exc:
        raise activity_unavailable(exc) from exc
    return _dashboard_to_read_model(snapshot)


@router.get("/statistics", response_model=StatisticsRead)
def read_statistics(
    sources: ActivitySources = Depends(get_activity_sources),
    owner_id: int = Depends(get_current_owner_id),
    settings: Settings = Depends(get_settings),
) -> StatisticsRead:
    """Devuelve los contadores de contactos, tareas, proyectos e interacciones."""

    snapshot = get_statistics(
        sources, owner_id, recent_days=settings.stats_recent_days, logger=logger
    )
    return _statistics_to_read_model(snapshot)


__all__ = ["router"]
