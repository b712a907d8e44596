"""Endpoints providing recent activity information."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from app.application.use_cases.activity import (
    DEFAULT_ACTIVITY_LIMIT,
    ActivityAggregationError,
    get_recent_activity,
)
from app.config import Settings, get_settings
from app.domain.entities import ActivityFeed
from app.domain.sources import ActivitySources
from app.interfaces.api.dependencies import get_activity_sources, get_current_owner_id
from app.interfaces.api.routes_helpers import activity_unavailable
from app.interfaces.api.schemas import ActivityEventRead, RecentActivityRead

router = APIRouter(prefix="/activity", tags=["activity"])

logger = logging.getLogger(__name__)


def _feed_to_schema(feed: ActivityFeed) -> RecentActivityRead:
    return RecentActivityRead(
        activities=[ActivityEventRead.model_validate(event) for event in feed.events],
        count=feed.count,
    )


@router.get("/recent", response_model=RecentActivityRead)
def read_recent_activity(
    limit: int = Query(
        DEFAULT_ACTIVITY_LIMIT,
        le=100,
        description="Número máximo de eventos a retornar (valores <= 0 usan el predeterminado)",
    ),
    sources: ActivitySources = Depends(get_activity_sources),
    owner_id: int = Depends(get_current_owner_id),
    settings: Settings = Depends(get_settings),
) -> RecentActivityRead:
    """Return the most recent activity events of the authenticated owner."""

    try:
        feed = get_recent_activity(
            sources,
            owner_id,
            limit=limit,
            since_days=settings.activity_lookback_days,
            logger=logger,
        )
    except ActivityAggregationError as exc:
        raise activity_unavailable(exc) from exc
    return _feed_to_schema(feed)


__all__ = ["router"]
