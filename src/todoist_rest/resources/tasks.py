# src/todoist_rest/resources/tasks.py

from __future__ import annotations

import logging

from ..api.client import make_call
from ..api.endpoints import EndpointName
from ..errors import InvalidInputError
from .common import decode_many, decode_one, id_param, is_blank, require_input
from .models import Task, TaskParams

logger = logging.getLogger(__name__)


def get_active_tasks(
    token: str | None,
    *,
    project_id: int | None = None,
    section_id: int | None = None,
    label_id: int | None = None,
    filter: str | None = None,
) -> list[Task]:
    """
    Active (not completed) tasks, optionally narrowed down.

    Filters are only sent when set; `filter` is a Todoist filter query
    such as "today | overdue".
    """
    query = {
        "project_id": project_id or None,
        "section_id": section_id or None,
        "label_id": label_id or None,
        "filter": filter or None,
    }
    query = {k: v for k, v in query.items() if v is not None}
    resp = make_call(token, EndpointName.GET_ACTIVE_TASKS, payload=query or None)
    return decode_many(resp, Task.from_api)


def create_task(token: str | None, params: TaskParams | None) -> Task:
    """Create a task. Content is the only required field."""
    params = require_input(params, "you must provide valid task params with at least a content field")
    if is_blank(params.content):
        raise InvalidInputError("content is required")
    resp = make_call(token, EndpointName.CREATE_TASK, payload=params)
    created = decode_one(resp, Task.from_api)
    logger.debug("Created task id=%s project_id=%s", created.id, created.project_id)
    return created


def get_active_task(token: str | None, task_id: int) -> Task:
    resp = make_call(token, EndpointName.GET_TASK, id_param(task_id))
    return decode_one(resp, Task.from_api)


def update_task(token: str | None, task_id: int, params: TaskParams | None) -> Task:
    params = require_input(params, "you must pass in valid update params")
    make_call(token, EndpointName.UPDATE_TASK, id_param(task_id), params)
    # update returns no body
    return get_active_task(token, task_id)


def delete_task(token: str | None, task_id: int) -> None:
    """Delete a task for good. Usually close_task is what you want."""
    resp = make_call(token, EndpointName.DELETE_TASK, id_param(task_id))
    resp.expect_no_content()


def close_task(token: str | None, task_id: int) -> None:
    """
    Close (complete) a task.

    Root tasks are marked complete and moved to history; subtasks are
    completed along with their parent.
    """
    resp = make_call(token, EndpointName.CLOSE_TASK, id_param(task_id))
    resp.expect_no_content()


def reopen_task(token: str | None, task_id: int) -> None:
    resp = make_call(token, EndpointName.REOPEN_TASK, id_param(task_id))
    resp.expect_no_content()
