"""Use cases for aggregating recent activity across an owner's records."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from app.domain.entities import ActivityEvent, ActivityFeed, ActivityKind
from app.domain.sources import ActivitySources

from .activity_derivation import ActivityRecord, derive_events

DEFAULT_ACTIVITY_LIMIT = 20
OVERFETCH_FACTOR = 2

_logger = logging.getLogger(__name__)


class ActivityAggregationError(RuntimeError):
    """Raised when one source of the activity feed cannot be read.

    The feed is never returned without one of its sources, so the failure of
    any source aborts the whole aggregation. ``kind`` names the failing source
    and the original exception is chained as ``__cause__``.
    """

    def __init__(self, kind: ActivityKind, cause: BaseException) -> None:
        self.kind = kind
        super().__init__(f"Could not load {kind.value.lower()} activity: {cause}")


def merge_and_rank(
    streams: Iterable[Sequence[ActivityEvent]], limit: int
) -> list[ActivityEvent]:
    """Merge ``streams`` newest first and keep at most ``limit`` events.

    The sort is stable: events with the same ``occurred_at`` keep the order in
    which their streams were given.
    """

    merged = [event for stream in streams for event in stream]
    merged.sort(key=lambda event: event.occurred_at, reverse=True)
    return merged[:limit]


def _collect_events(
    kind: ActivityKind, fetch: Callable[[], Sequence[ActivityRecord]]
) -> list[ActivityEvent]:
    try:
        records = fetch()
        return [event for record in records for event in derive_events(record)]
    except Exception as exc:
        raise ActivityAggregationError(kind, exc) from exc


def get_recent_activity(
    sources: ActivitySources,
    owner_id: int,
    *,
    limit: int = DEFAULT_ACTIVITY_LIMIT,
    since_days: int | None = None,
    logger: logging.Logger | None = None,
) -> ActivityFeed:
    """Return the merged, newest-first activity of ``owner_id``.

    Each source is asked for twice ``limit`` records because a record can
    yield more than one event. ``limit`` values below one fall back to
    ``DEFAULT_ACTIVITY_LIMIT``.
    """

    log = logger or _logger
    if limit <= 0:
        limit = DEFAULT_ACTIVITY_LIMIT
    fetch_limit = limit * OVERFETCH_FACTOR

    pipelines = (
        (ActivityKind.INTERACTION, sources.interactions),
        (ActivityKind.TASK, sources.tasks),
        (ActivityKind.PROJECT, sources.projects),
        (ActivityKind.CONTACT, sources.contacts),
    )

    streams: list[list[ActivityEvent]] = []
    for kind, source in pipelines:
        try:
            events = _collect_events(
                kind,
                lambda source=source: source.list_recent(
                    owner_id, since_days=since_days, limit=fetch_limit
                ),
            )
        except ActivityAggregationError as exc:
            log.error(
                "Activity feed aborted for owner %s: %s source failed (%s)",
                owner_id,
                kind.value,
                exc.__cause__,
            )
            raise
        streams.append(events)

    ranked = merge_and_rank(streams, limit)
    log.debug(
        "Activity feed for owner %s: %d events from %d candidates",
        owner_id,
        len(ranked),
        sum(len(stream) for stream in streams),
    )
    return ActivityFeed(events=ranked)


__all__ = [
    "ActivityAggregationError",
    "DEFAULT_ACTIVITY_LIMIT",
    "OVERFETCH_FACTOR",
    "get_recent_activity",
    "merge_and_rank",
]
