# src/todoist_rest/api/endpoints.py

"""Static registry of the Todoist REST calls this client knows about."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum


class HTTPMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def sends_query(self) -> bool:
        """GET/DELETE carry their payload as query parameters, the rest as a JSON body."""
        return self in (HTTPMethod.GET, HTTPMethod.DELETE)


@dataclass(frozen=True, slots=True)
class Endpoint:
    """
    A single call of the API.

    `path` uses ":name" placeholders; `path_params` maps each placeholder
    name to a human description of the expected value.
    """

    path: str
    method: HTTPMethod
    path_params: Mapping[str, str] = field(default_factory=dict)


class EndpointName(StrEnum):
    # projects
    GET_PROJECTS = "GetProjects"
    CREATE_PROJECT = "CreateProject"
    GET_PROJECT = "GetProject"
    UPDATE_PROJECT = "UpdateProject"
    DELETE_PROJECT = "DeleteProject"

    # tasks
    GET_ACTIVE_TASKS = "GetTasks"
    CREATE_TASK = "CreateTask"
    GET_TASK = "GetTask"
    UPDATE_TASK = "UpdateTask"
    DELETE_TASK = "DeleteTask"
    CLOSE_TASK = "CloseTask"
    REOPEN_TASK = "ReopenTask"

    # sections
    GET_ALL_SECTIONS = "GetAllSections"
    CREATE_SECTION = "CreateSection"
    GET_SECTION = "GetSection"
    UPDATE_SECTION = "UpdateSection"
    DELETE_SECTION = "DeleteSection"

    # labels
    GET_ALL_LABELS = "GetAllLabels"
    CREATE_LABEL = "CreateLabel"
    GET_LABEL = "GetLabel"
    UPDATE_LABEL = "UpdateLabel"
    DELETE_LABEL = "DeleteLabel"


def _collection(path: str, method: HTTPMethod) -> Endpoint:
    return Endpoint(path=path, method=method)


def _item(path: str, method: HTTPMethod, what: str) -> Endpoint:
    return Endpoint(path=path, method=method, path_params={"id": f"The {what} id"})


ENDPOINTS: dict[str, Endpoint] = {
    # projects
    EndpointName.GET_PROJECTS: _collection("/projects", HTTPMethod.GET),
    EndpointName.CREATE_PROJECT: _collection("/projects", HTTPMethod.POST),
    EndpointName.GET_PROJECT: _item("/projects/:id", HTTPMethod.GET, "project"),
    EndpointName.UPDATE_PROJECT: _item("/projects/:id", HTTPMethod.POST, "project"),
    EndpointName.DELETE_PROJECT: _item("/projects/:id", HTTPMethod.DELETE, "project"),
    # tasks
    EndpointName.GET_ACTIVE_TASKS: _collection("/tasks", HTTPMethod.GET),
    EndpointName.CREATE_TASK: _collection("/tasks", HTTPMethod.POST),
    EndpointName.GET_TASK: _item("/tasks/:id", HTTPMethod.GET, "task"),
    EndpointName.UPDATE_TASK: _item("/tasks/:id", HTTPMethod.POST, "task"),
    EndpointName.DELETE_TASK: _item("/tasks/:id", HTTPMethod.DELETE, "task"),
    EndpointName.CLOSE_TASK: _item("/tasks/:id/close", HTTPMethod.POST, "task"),
    EndpointName.REOPEN_TASK: _item("/tasks/:id/reopen", HTTPMethod.POST, "task"),
    # sections
    EndpointName.GET_ALL_SECTIONS: _collection("/sections", HTTPMethod.GET),
    EndpointName.CREATE_SECTION: _collection("/sections", HTTPMethod.POST),
    EndpointName.GET_SECTION: _item("/sections/:id", HTTPMethod.GET, "section"),
    EndpointName.UPDATE_SECTION: _item("/sections/:id", HTTPMethod.POST, "section"),
    EndpointName.DELETE_SECTION: _item("/sections/:id", HTTPMethod.DELETE, "section"),
    # labels
    EndpointName.GET_ALL_LABELS: _collection("/labels", HTTPMethod.GET),
    EndpointName.CREATE_LABEL: _collection("/labels", HTTPMethod.POST),
    EndpointName.GET_LABEL: _item("/labels/:id", HTTPMethod.GET, "label"),
    EndpointName.UPDATE_LABEL: _item("/labels/:id", HTTPMethod.POST, "label"),
    EndpointName.DELETE_LABEL: _item("/labels/:id", HTTPMethod.DELETE, "label"),
}


def get_endpoint(name: str) -> Endpoint | None:
    return ENDPOINTS.get(str(name))
