from datetime import timedelta

import pytest

from app.application.use_cases.activity_derivation import (
    derive_contact_events,
    derive_events,
    derive_interaction_events,
    derive_project_events,
    derive_task_events,
    display_title,
    truncate_detail,
)
from app.domain.entities import (
    PROJECT_STATUS_CANCELLED,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    ActivityAction,
    ActivityKind,
    RelatedEntity,
)
from fakes import (
    BASE_TIME,
    make_contact,
    make_interaction,
    make_project,
    make_task,
)


def test_truncate_detail_keeps_text_up_to_limit():
    text = "a" * 100

    assert truncate_detail(text) == text
    assert truncate_detail("") == ""


def test_truncate_detail_cuts_long_text_with_ellipsis():
    text = "b" * 150

    result = truncate_detail(text)

    assert len(result) == 100
    assert result == "b" * 97 + "..."


def test_display_title_uses_placeholder_for_blank_values():
    assert display_title(ActivityKind.TASK, "Call back") == "Call back"
    assert display_title(ActivityKind.TASK, "   ") == "Untitled task"
    assert display_title(ActivityKind.INTERACTION, None) == "Untitled interaction"
    assert display_title(ActivityKind.PROJECT, "") == "Untitled project"
    assert display_title(ActivityKind.CONTACT, None) == "Unnamed contact"


def test_record_saved_right_after_creation_yields_single_event():
    task = make_task(updated_at=BASE_TIME + timedelta(seconds=30))

    events = derive_task_events(task)

    assert [event.action for event in events] == [ActivityAction.CREATED]
    assert events[0].occurred_at == BASE_TIME


def test_modification_exactly_at_guard_is_not_an_update():
    contact = make_contact(updated_at=BASE_TIME + timedelta(minutes=1))

    assert [event.action for event in derive_contact_events(contact)] == [
        ActivityAction.CREATED
    ]


def test_interaction_update_adds_updated_event():
    updated_at = BASE_TIME + timedelta(hours=2)
    interaction = make_interaction(updated_at=updated_at, description="Talked pricing")

    events = derive_interaction_events(interaction)

    assert [(event.action, event.occurred_at) for event in events] == [
        (ActivityAction.CREATED, BASE_TIME),
        (ActivityAction.UPDATED, updated_at),
    ]
    assert all(event.detail == "Talked pricing" for event in events)


def test_completed_task_reports_completed_in_creation_slot():
    task = make_task(status=TASK_STATUS_COMPLETED)

    events = derive_task_events(task)

    assert [(event.action, event.occurred_at) for event in events] == [
        (ActivityAction.COMPLETED, BASE_TIME)
    ]


def test_task_completed_later_reports_update_and_completion():
    completed_at = BASE_TIME + timedelta(minutes=2)
    task = make_task(status=TASK_STATUS_COMPLETED, updated_at=completed_at)

    events = derive_task_events(task)

    assert [(event.action, event.occurred_at) for event in events] == [
        (ActivityAction.COMPLETED, BASE_TIME),
        (ActivityAction.UPDATED, completed_at),
        (ActivityAction.COMPLETED, completed_at),
    ]


def test_pending_task_update_has_no_completion():
    task = make_task(updated_at=BASE_TIME + timedelta(days=1))

    assert [event.action for event in derive_task_events(task)] == [
        ActivityAction.CREATED,
        ActivityAction.UPDATED,
    ]


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (PROJECT_STATUS_IN_PROGRESS, ActivityAction.STARTED),
        (PROJECT_STATUS_COMPLETED, ActivityAction.COMPLETED),
        (PROJECT_STATUS_CANCELLED, ActivityAction.CANCELLED),
        ("ON_HOLD", ActivityAction.UPDATED),
    ],
)
def test_project_update_maps_status_to_one_action(status, expected):
    project = make_project(status=status, updated_at=BASE_TIME + timedelta(days=3))

    events = derive_project_events(project)

    assert [event.action for event in events] == [ActivityAction.CREATED, expected]


def test_unmodified_project_reports_creation_only():
    project = make_project(status=PROJECT_STATUS_COMPLETED)

    assert [event.action for event in derive_project_events(project)] == [
        ActivityAction.CREATED
    ]


def test_task_prefers_contact_over_project_as_related_entity():
    task = make_task(
        contact=RelatedEntity(id=7, name="Ana Souza"),
        project=RelatedEntity(id=9, name="CRM rollout"),
    )

    event = derive_task_events(task)[0]

    assert (event.related_id, event.related_name) == (7, "Ana Souza")


def test_task_falls_back_to_project_when_contact_has_no_name():
    task = make_task(
        contact=RelatedEntity(id=7, name=""),
        project=RelatedEntity(id=9, name="CRM rollout"),
    )

    event = derive_task_events(task)[0]

    assert (event.related_id, event.related_name) == (9, "CRM rollout")


def test_missing_association_leaves_related_fields_empty():
    interaction = make_interaction(contact=None)
    contact = make_contact(company="Acme")

    for event in derive_interaction_events(interaction) + derive_contact_events(contact):
        assert event.related_id is None
        assert event.related_name is None


def test_events_use_placeholders_and_empty_detail_is_none():
    interaction = make_interaction(subject="", description="")

    event = derive_interaction_events(interaction)[0]

    assert event.title == "Untitled interaction"
    assert event.detail is None


def test_long_description_is_truncated_in_events():
    project = make_project(description="x" * 250)

    event = derive_project_events(project)[0]

    assert event.detail == "x" * 97 + "..."


def test_derive_events_dispatches_on_record_type():
    task = make_task(id=3)
    contact = make_contact(id=4)

    assert derive_events(task)[0].source_kind is ActivityKind.TASK
    assert derive_events(contact)[0].source_kind is ActivityKind.CONTACT
    assert derive_events(contact)[0].event_id == "contact-4-created-20240301090000"


def test_derive_events_rejects_unknown_records():
    with pytest.raises(TypeError):
        derive_events(object())


def test_event_ids_are_unique_for_task_completed_after_creation():
    task = make_task(
        id=2, status=TASK_STATUS_COMPLETED, updated_at=BASE_TIME + timedelta(minutes=2)
    )

    ids = [event.event_id for event in derive_task_events(task)]

    assert len(ids) == len(set(ids)) == 3
    assert ids == [
        "task-2-completed-20240301090000",
        "task-2-updated-20240301090200",
        "task-2-completed-20240301090200",
    ]
