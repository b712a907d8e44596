import logging
from datetime import datetime, timedelta

from app.application.use_cases.statistics import get_statistics
from app.domain.entities import (
    CONTACT_TYPE_CLIENT,
    CONTACT_TYPE_LEAD,
    PROJECT_STATUS_CANCELLED,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_PENDING,
)
from fakes import FakeSource, make_sources

REFERENCE = datetime(2024, 6, 30, 12, 0, 0)


def _contact_counter(filters):
    if filters is None:
        return 10
    if filters.type == CONTACT_TYPE_CLIENT:
        return 6
    if filters.type == CONTACT_TYPE_LEAD:
        return 4
    return 2


def _task_counter(filters):
    if filters is None:
        return 8
    if filters.status == TASK_STATUS_PENDING:
        return 5
    if filters.status == TASK_STATUS_COMPLETED:
        return 3
    if filters.overdue_at is not None:
        return 1
    return 7


def _project_counter(filters):
    if filters is None:
        return 4
    return {
        PROJECT_STATUS_IN_PROGRESS: 2,
        PROJECT_STATUS_COMPLETED: 1,
        PROJECT_STATUS_CANCELLED: 1,
    }.get(filters.status, 3)


def _interaction_counter(filters):
    return 12 if filters is None else 9


def test_statistics_reports_every_counter():
    sources = make_sources(
        contacts=FakeSource(counter=_contact_counter),
        tasks=FakeSource(counter=_task_counter),
        projects=FakeSource(counter=_project_counter),
        interactions=FakeSource(counter=_interaction_counter),
    )

    snapshot = get_statistics(sources, owner_id=1, reference=REFERENCE)

    assert (snapshot.contacts.total, snapshot.contacts.clients) == (10, 6)
    assert (snapshot.contacts.leads, snapshot.contacts.recent) == (4, 2)
    assert snapshot.tasks.total == 8
    assert snapshot.tasks.pending == 5
    assert snapshot.tasks.completed == 3
    assert snapshot.tasks.overdue == 1
    assert snapshot.tasks.recent == 7
    assert snapshot.projects.active == 2
    assert snapshot.projects.completed == 1
    assert snapshot.projects.cancelled == 1
    assert snapshot.projects.recent == 3
    assert (snapshot.interactions.total, snapshot.interactions.recent) == (12, 9)
    assert snapshot.degraded == []


def test_recent_window_and_overdue_reference_derive_from_reference_time():
    tasks = FakeSource(counter=_task_counter)
    sources = make_sources(tasks=tasks)

    get_statistics(sources, owner_id=1, reference=REFERENCE, recent_days=7)

    filters = [kwargs["filters"] for _, kwargs in tasks.calls if kwargs["filters"]]
    assert any(f.overdue_at == REFERENCE for f in filters)
    assert any(f.created_since == REFERENCE - timedelta(days=7) for f in filters)


def test_failing_counter_degrades_to_zero(caplog):
    sources = make_sources(
        contacts=FakeSource(counter=_contact_counter),
        tasks=FakeSource(
            counter=_task_counter,
            fail_count_when=lambda filters: filters is not None
            and filters.overdue_at is not None,
        ),
        projects=FakeSource(fail_on={"count"}),
    )

    with caplog.at_level(logging.WARNING):
        snapshot = get_statistics(sources, owner_id=3, reference=REFERENCE)

    assert snapshot.tasks.overdue == 0
    assert snapshot.tasks.pending == 5
    assert snapshot.contacts.total == 10
    assert snapshot.projects.total == 0
    assert "tasks.overdue" in snapshot.degraded
    assert "projects.total" in snapshot.degraded
    assert "contacts.total" not in snapshot.degraded
    assert "tasks.overdue" in caplog.text


def test_statistics_survive_every_source_failing():
    failing = {"count"}
    sources = make_sources(
        contacts=FakeSource(fail_on=failing),
        tasks=FakeSource(fail_on=failing),
        projects=FakeSource(fail_on=failing),
        interactions=FakeSource(fail_on=failing),
    )

    snapshot = get_statistics(sources, owner_id=1, reference=REFERENCE)

    assert snapshot.contacts.total == 0
    assert snapshot.interactions.recent == 0
    assert len(snapshot.degraded) == 16
