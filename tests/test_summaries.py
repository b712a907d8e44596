from datetime import timedelta

import pytest

from app.application.use_cases.contacts import get_contact_summary
from app.application.use_cases.projects import get_project_summary
from app.application.use_cases.tasks import list_overdue_tasks, list_upcoming_tasks
from app.domain.entities import (
    CONTACT_TYPE_LEAD,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_PENDING,
)
from fakes import FakeSource, day, make_contact, make_interaction, make_project, make_sources, make_task


def _task_counter(filters):
    if filters.overdue_at is not None:
        return 1
    if filters.status == TASK_STATUS_COMPLETED:
        return 1
    return 4


def _project_counter(filters):
    return {PROJECT_STATUS_IN_PROGRESS: 2, PROJECT_STATUS_COMPLETED: 1}.get(filters.status, 3)


def test_contact_summary_counts_related_records():
    sources = make_sources(
        contacts=FakeSource([make_contact(id=7)]),
        interactions=FakeSource(
            [make_interaction(id=3, created_at=day(5)), make_interaction(id=2, created_at=day(2))],
            counter=lambda filters: 2,
        ),
        tasks=FakeSource(counter=_task_counter),
        projects=FakeSource(counter=_project_counter),
    )

    summary = get_contact_summary(sources, owner_id=1, contact_id=7)

    assert summary.contact.id == 7
    assert summary.total_interactions == 2
    assert summary.last_interaction_date == day(5)
    assert (summary.total_tasks, summary.completed_tasks, summary.pending_tasks) == (4, 1, 3)
    assert (summary.total_projects, summary.active_projects, summary.completed_projects) == (3, 2, 1)
    filters = [kwargs["filters"] for name, kwargs in sources.tasks.calls if name == "count"]
    assert all(f.contact_id == 7 for f in filters)


def test_contact_summary_skips_projects_for_leads():
    projects = FakeSource(counter=_project_counter)
    sources = make_sources(
        contacts=FakeSource([make_contact(id=7, type=CONTACT_TYPE_LEAD)]),
        tasks=FakeSource(counter=lambda filters: 0),
        projects=projects,
    )

    summary = get_contact_summary(sources, owner_id=1, contact_id=7)

    assert summary.total_projects == 0
    assert summary.last_interaction_date is None
    assert projects.calls == []


def test_contact_summary_rejects_unknown_contact():
    with pytest.raises(ValueError, match="Contacto no encontrado"):
        get_contact_summary(make_sources(), owner_id=1, contact_id=99)


def test_project_summary_reports_progress():
    tasks = FakeSource(counter=_task_counter)
    sources = make_sources(projects=FakeSource([make_project(id=4)]), tasks=tasks)

    summary = get_project_summary(sources, owner_id=1, project_id=4, reference=day(10))

    assert summary.total_tasks == 4
    assert summary.completed_tasks == 1
    assert summary.pending_tasks == 3
    assert summary.overdue_tasks == 1
    assert summary.progress == 25.0
    overdue_filter = [kwargs["filters"] for _, kwargs in tasks.calls if kwargs["filters"].overdue_at]
    assert overdue_filter[0].overdue_at == day(10)
    assert overdue_filter[0].project_id == 4


def test_project_without_tasks_has_zero_progress():
    sources = make_sources(
        projects=FakeSource([make_project(id=4)]), tasks=FakeSource(counter=lambda filters: 0)
    )

    assert get_project_summary(sources, owner_id=1, project_id=4).progress == 0.0


def test_project_summary_rejects_unknown_project():
    with pytest.raises(ValueError, match="Proyecto no encontrado"):
        get_project_summary(make_sources(), owner_id=1, project_id=4)


def test_upcoming_tasks_are_sorted_by_due_date_within_window():
    tasks = FakeSource(
        [make_task(id=1, due_date=day(14)), make_task(id=2, due_date=day(11))]
    )
    sources = make_sources(tasks=tasks)

    result = list_upcoming_tasks(sources, owner_id=1, days=5, reference=day(10))

    assert [task.id for task in result] == [2, 1]
    filters = tasks.calls[0][1]["filters"]
    assert filters.status == TASK_STATUS_PENDING
    assert (filters.due_after, filters.due_before) == (day(10), day(15))


@pytest.mark.parametrize("days", [0, -3])
def test_upcoming_tasks_default_window(days):
    tasks = FakeSource()

    list_upcoming_tasks(make_sources(tasks=tasks), owner_id=1, days=days, reference=day(1))

    assert tasks.calls[0][1]["filters"].due_before == day(1) + timedelta(days=7)


def test_overdue_tasks_use_reference_time():
    tasks = FakeSource([make_task(id=1, due_date=day(3)), make_task(id=2, due_date=day(1))])

    result = list_overdue_tasks(make_sources(tasks=tasks), owner_id=1, reference=day(5))

    assert [task.id for task in result] == [2, 1]
    assert tasks.calls[0][1]["filters"].overdue_at == day(5)
