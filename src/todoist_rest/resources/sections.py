# src/todoist_rest/resources/sections.py

from __future__ import annotations

from ..api.client import make_call
from ..api.endpoints import EndpointName
from ..errors import InvalidInputError
from .common import decode_many, decode_one, id_param, is_blank, require_input
from .models import Section, SectionParams


def get_all_sections(token: str | None, project_id: int | None = None) -> list[Section]:
    """All sections, or only those of project_id when it is non-zero."""
    query = {"project_id": str(project_id)} if project_id else {}
    resp = make_call(token, EndpointName.GET_ALL_SECTIONS, payload=query)
    return decode_many(resp, Section.from_api)


def create_section(token: str | None, params: SectionParams | None) -> Section:
    params = require_input(params, "you must provide valid section params with at least a name and a project_id")
    if is_blank(params.name) or not params.project_id:
        raise InvalidInputError("name and project_id are required")
    resp = make_call(token, EndpointName.CREATE_SECTION, payload=params)
    return decode_one(resp, Section.from_api)


def get_section(token: str | None, section_id: int) -> Section:
    resp = make_call(token, EndpointName.GET_SECTION, id_param(section_id))
    return decode_one(resp, Section.from_api)


def update_section(token: str | None, section_id: int, params: SectionParams | None) -> Section:
    """Rename a section (the name is the only field the API lets you change)."""
    params = require_input(params, "you must provide valid section params with at least a name")
    if is_blank(params.name):
        raise InvalidInputError("name is required")
    make_call(token, EndpointName.UPDATE_SECTION, id_param(section_id), params)
    return get_section(token, section_id)


def delete_section(token: str | None, section_id: int) -> None:
    resp = make_call(token, EndpointName.DELETE_SECTION, id_param(section_id))
    resp.expect_no_content()
