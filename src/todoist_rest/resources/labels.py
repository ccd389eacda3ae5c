# src/todoist_rest/resources/labels.py

from __future__ import annotations

from ..api.client import make_call
from ..api.endpoints import EndpointName
from ..errors import InvalidInputError
from .common import decode_many, decode_one, id_param, is_blank, require_input
from .models import Label, LabelParams


def get_all_labels(token: str | None) -> list[Label]:
    resp = make_call(token, EndpointName.GET_ALL_LABELS)
    return decode_many(resp, Label.from_api)


def create_label(token: str | None, params: LabelParams | None) -> Label:
    params = require_input(params, "you must provide valid label params with at least a name")
    if is_blank(params.name):
        raise InvalidInputError("name is required")
    resp = make_call(token, EndpointName.CREATE_LABEL, payload=params)
    return decode_one(resp, Label.from_api)


def get_label(token: str | None, label_id: int) -> Label:
    resp = make_call(token, EndpointName.GET_LABEL, id_param(label_id))
    return decode_one(resp, Label.from_api)


def update_label(token: str | None, label_id: int, params: LabelParams | None) -> Label:
    params = require_input(params, "you must pass in valid update params")
    make_call(token, EndpointName.UPDATE_LABEL, id_param(label_id), params)
    return get_label(token, label_id)


def delete_label(token: str | None, label_id: int) -> None:
    resp = make_call(token, EndpointName.DELETE_LABEL, id_param(label_id))
    resp.expect_no_content()
