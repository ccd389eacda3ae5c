# tests/test_tasks.py

from __future__ import annotations

import pytest

from todoist_rest.errors import DecodeError, InvalidInputError, MissingTokenError, UnexpectedStatusError
from todoist_rest.resources.models import Priority, TaskDue, TaskParams
from todoist_rest.resources.tasks import (
    close_task,
    create_task,
    delete_task,
    get_active_task,
    get_active_tasks,
    reopen_task,
    update_task,
)

from .fakes import FakeTodoistAPI, json_body

TASK = {
    "id": 2995104339,
    "project_id": 2203306141,
    "section_id": 7025,
    "content": "Buy Milk",
    "description": "",
    "completed": False,
    "label_ids": [2156154810, 2156154820],
    "parent_id": 2995104589,
    "order": 1,
    "priority": 4,
    "due": {
        "date": "2016-09-01",
        "recurring": False,
        "datetime": "2016-09-01T12:00:00.000000Z",
        "string": "tomorrow at 12",
        "timezone": "Europe/Moscow",
    },
    "url": "https://todoist.com/showTask?id=2995104339",
    "comment_count": 0,
    "assignee": 2671142,
    "assigner": 2671362,
}


def test_empty_token_fails(api: FakeTodoistAPI, no_default_token) -> None:
    with pytest.raises(MissingTokenError, match="Empty token"):
        get_active_tasks("")


def test_get_active_tasks_decodes_nested_due(api: FakeTodoistAPI) -> None:
    api.add("GET", "/tasks", json=[TASK, {"id": 1, "content": "No due"}])

    tasks = get_active_tasks("tok")

    first, second = tasks
    assert first.priority is Priority.URGENT
    assert first.label_ids == [2156154810, 2156154820]
    assert first.due == TaskDue(
        date="2016-09-01",
        datetime="2016-09-01T12:00:00.000000Z",
        recurring=False,
        string="tomorrow at 12",
        timezone="Europe/Moscow",
    )
    assert second.due is None
    assert second.priority is Priority.NORMAL
    assert api.last.url.params.multi_items() == []


def test_get_active_tasks_sends_only_set_filters(api: FakeTodoistAPI) -> None:
    api.add("GET", "/tasks", json=[])

    get_active_tasks("tok", project_id=2203306141, filter="today | overdue")

    params = api.last.url.params
    assert params["project_id"] == "2203306141"
    assert params["filter"] == "today | overdue"
    assert "section_id" not in params
    assert "label_id" not in params


@pytest.mark.parametrize("params", [None, TaskParams(), TaskParams(content="")])
def test_create_task_requires_content(api: FakeTodoistAPI, params) -> None:
    with pytest.raises(InvalidInputError):
        create_task("tok", params)
    assert api.requests == []


def test_create_task_flattens_due_and_priority(api: FakeTodoistAPI) -> None:
    api.add("POST", "/tasks", json=TASK)

    created = create_task(
        "tok",
        TaskParams(
            content="Buy Milk",
            project_id=2203306141,
            priority=Priority.URGENT,
            due_string="tomorrow at 12",
            due_lang="en",
        ),
    )

    assert created.id == 2995104339
    assert json_body(api.last) == {
        "content": "Buy Milk",
        "project_id": 2203306141,
        "priority": 4,
        "due_string": "tomorrow at 12",
        "due_lang": "en",
    }


def test_update_task_refetches(api: FakeTodoistAPI) -> None:
    api.add("POST", "/tasks/2995104339", status=204)
    api.add("GET", "/tasks/2995104339", json={**TASK, "content": "Buy Coffee"})

    updated = update_task("tok", 2995104339, TaskParams(content="Buy Coffee"))

    assert api.calls() == [("POST", "/tasks/2995104339"), ("GET", "/tasks/2995104339")]
    assert json_body(api.requests[0]) == {"content": "Buy Coffee"}
    assert updated.content == "Buy Coffee"


def test_update_task_requires_params(api: FakeTodoistAPI) -> None:
    with pytest.raises(InvalidInputError):
        update_task("tok", 1, None)


def test_get_active_task(api: FakeTodoistAPI) -> None:
    api.add("GET", "/tasks/2995104339", json=TASK)
    task = get_active_task("tok", 2995104339)
    assert task.content == "Buy Milk"
    assert task.section_id == 7025


@pytest.mark.parametrize(
    ("fn", "method", "path"),
    [
        (close_task, "POST", "/tasks/5/close"),
        (reopen_task, "POST", "/tasks/5/reopen"),
        (delete_task, "DELETE", "/tasks/5"),
    ],
)
def test_state_changes_expect_no_content(api: FakeTodoistAPI, fn, method: str, path: str) -> None:
    api.add(method, path, status=204)
    fn("tok", 5)
    assert api.calls() == [(method, path)]
    assert api.last.content == b""

    api.add(method, path, status=200, json={})
    with pytest.raises(UnexpectedStatusError):
        fn("tok", 5)


@pytest.mark.parametrize("label_ids", [[1, None], ["abc"], 5, "12", [True]])
def test_malformed_label_ids_raise_decode_error(api: FakeTodoistAPI, label_ids) -> None:
    api.add("GET", "/tasks/5", json={**TASK, "id": 5, "label_ids": label_ids})
    with pytest.raises(DecodeError):
        get_active_task("tok", 5)

    api.add("GET", "/tasks", json=[{**TASK, "label_ids": label_ids}])
    with pytest.raises(DecodeError):
        get_active_tasks("tok")
