# src/todoist_rest/resources/projects.py

"""Projects: the containers that hold sections and tasks."""

from __future__ import annotations

import logging

from ..api.client import make_call
from ..api.endpoints import EndpointName
from ..errors import InvalidInputError
from .common import decode_many, decode_one, id_param, is_blank, require_input
from .models import Project, ProjectParams

logger = logging.getLogger(__name__)


def get_all_projects(token: str | None) -> list[Project]:
    resp = make_call(token, EndpointName.GET_PROJECTS)
    return decode_many(resp, Project.from_api)


def create_project(token: str | None, params: ProjectParams | None) -> Project:
    """Create a project. Only the name is required."""
    params = require_input(params, "you must provide valid project params with at least a name")
    if is_blank(params.name):
        raise InvalidInputError("name is required")
    resp = make_call(token, EndpointName.CREATE_PROJECT, payload=params)
    created = decode_one(resp, Project.from_api)
    logger.debug("Created project id=%s", created.id)
    return created


def get_project(token: str | None, project_id: int) -> Project:
    resp = make_call(token, EndpointName.GET_PROJECT, id_param(project_id))
    return decode_one(resp, Project.from_api)


def update_project(token: str | None, project_id: int, params: ProjectParams | None) -> Project:
    """
    Update name/color/favorite of a project and return its fresh state.

    The update call answers with no body, so the project is fetched again.
    """
    params = require_input(params, "you must pass in valid update params")
    # Not documented as required, but the API rejects the update with
    # "invalid id" unless the id is repeated in the body.
    payload = {**params.to_payload(), "id": project_id}
    make_call(token, EndpointName.UPDATE_PROJECT, id_param(project_id), payload)
    return get_project(token, project_id)


def delete_project(token: str | None, project_id: int) -> None:
    resp = make_call(token, EndpointName.DELETE_PROJECT, id_param(project_id))
    resp.expect_no_content()
