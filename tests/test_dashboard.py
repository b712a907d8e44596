from datetime import timedelta

import pytest

from app.application.use_cases.activity import ActivityAggregationError
from app.application.use_cases.dashboard import (
    DASHBOARD_ACTIVITY_LIMIT,
    DASHBOARD_RECENT_ITEMS_LIMIT,
    get_dashboard,
)
from app.domain.entities import (
    PROJECT_STATUS_IN_PROGRESS,
    TASK_STATUS_PENDING,
    ActivityKind,
    RelatedEntity,
)
from fakes import (
    BASE_TIME,
    FakeSource,
    day,
    make_contact,
    make_interaction,
    make_project,
    make_sources,
    make_task,
)


def _populated_sources(**overrides):
    client = RelatedEntity(id=1, name="Ana Souza")
    values = {
        "interactions": FakeSource(
            [make_interaction(id=i, created_at=day(i), contact=client) for i in range(1, 4)]
        ),
        "tasks": FakeSource(
            [
                make_task(id=1, title="Send proposal", due_date=day(9), project=RelatedEntity(id=4, name="CRM rollout")),
                make_task(id=2, title="", created_at=day(2)),
            ]
        ),
        "projects": FakeSource([make_project(id=4, client=client)]),
        "contacts": FakeSource(
            [make_contact(id=i, created_at=day(i), company="Acme") for i in range(1, 9)]
        ),
    }
    values.update(overrides)
    return make_sources(**values)


def test_dashboard_assembles_every_section():
    sources = _populated_sources()

    snapshot = get_dashboard(sources, owner_id=1, reference=day(10))

    assert len(snapshot.recent_activity) == DASHBOARD_ACTIVITY_LIMIT
    assert snapshot.recent_activity[0].occurred_at == day(8)
    assert [item.id for item in snapshot.recent_interactions] == [1, 2, 3]
    assert snapshot.recent_interactions[0].related_name == "Ana Souza"
    assert len(snapshot.recent_contacts) == DASHBOARD_RECENT_ITEMS_LIMIT
    assert snapshot.recent_contacts[0].related_name == "Acme"
    assert snapshot.statistics.contacts.total == 8


def test_recent_items_are_projected_for_display():
    snapshot = get_dashboard(_populated_sources(), owner_id=1, reference=day(10))

    first_task, second_task = snapshot.recent_tasks
    assert first_task.title == "Send proposal"
    assert first_task.related_name == "CRM rollout"
    assert first_task.timestamp == day(9)
    assert second_task.title == "Untitled task"
    assert second_task.timestamp == day(2)
    project = snapshot.recent_projects[0]
    assert (project.status, project.related_name) == (PROJECT_STATUS_IN_PROGRESS, "Ana Souza")


def test_panels_request_filtered_listings():
    sources = _populated_sources()

    get_dashboard(sources, owner_id=1, reference=day(10))

    task_listing = [kwargs for name, kwargs in sources.tasks.calls if name == "list_by_owner"]
    project_listing = [
        kwargs for name, kwargs in sources.projects.calls if name == "list_by_owner"
    ]
    assert task_listing[0]["filters"].status == TASK_STATUS_PENDING
    assert task_listing[0]["limit"] == DASHBOARD_RECENT_ITEMS_LIMIT
    assert project_listing[0]["filters"].status == PROJECT_STATUS_IN_PROGRESS


def test_failing_panel_renders_empty_without_affecting_others():
    contacts = FakeSource(
        [make_contact(id=1, created_at=BASE_TIME + timedelta(days=1))],
        fail_on={"list_by_owner", "count"},
    )
    sources = _populated_sources(contacts=contacts)

    snapshot = get_dashboard(sources, owner_id=1, reference=day(10))

    assert snapshot.recent_contacts == []
    assert snapshot.recent_interactions
    assert snapshot.recent_tasks
    assert snapshot.recent_projects
    assert snapshot.statistics.contacts.total == 0
    assert "contacts.total" in snapshot.statistics.degraded
    assert any(
        event.source_kind is ActivityKind.CONTACT for event in snapshot.recent_activity
    )


def test_activity_failure_propagates_from_dashboard():
    sources = _populated_sources(tasks=FakeSource(fail_on={"list_recent"}))

    with pytest.raises(ActivityAggregationError) as excinfo:
        get_dashboard(sources, owner_id=1, reference=day(10))

    assert excinfo.value.kind is ActivityKind.TASK


def test_contact_source_fully_down_fails_the_dashboard():
    contacts = FakeSource(fail_on={"list_recent", "list_by_owner", "count"})
    sources = _populated_sources(contacts=contacts)

    with pytest.raises(ActivityAggregationError) as excinfo:
        get_dashboard(sources, owner_id=1, reference=day(10))

    assert excinfo.value.kind is ActivityKind.CONTACT


def test_unnamed_associations_render_without_related_name():
    unnamed = RelatedEntity(id=1, name="")
    sources = _populated_sources(
        interactions=FakeSource([make_interaction(id=1, contact=unnamed)]),
        projects=FakeSource([make_project(id=4, client=unnamed)]),
        tasks=FakeSource([make_task(id=1, contact=unnamed)]),
    )

    snapshot = get_dashboard(sources, owner_id=1, reference=day(10))

    assert snapshot.recent_interactions[0].related_name is None
    assert snapshot.recent_projects[0].related_name is None
    assert snapshot.recent_tasks[0].related_name is None
