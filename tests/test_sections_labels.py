# tests/test_sections_labels.py

from __future__ import annotations

import pytest

from todoist_rest.errors import InvalidInputError, UnexpectedStatusError
from todoist_rest.resources.labels import (
    create_label,
    delete_label,
    get_all_labels,
    get_label,
    update_label,
)
from todoist_rest.resources.models import Color, LabelParams, SectionParams
from todoist_rest.resources.sections import (
    create_section,
    delete_section,
    get_all_sections,
    get_section,
    update_section,
)

from .fakes import FakeTodoistAPI, json_body

# ---- sections ----


def test_get_all_sections_without_project_sends_no_filter(api: FakeTodoistAPI) -> None:
    api.add("GET", "/sections", json=[{"id": 7025, "project_id": 2203306141, "order": 1, "name": "Groceries"}])

    sections = get_all_sections("tok")

    assert sections[0].name == "Groceries"
    assert sections[0].project_id == 2203306141
    assert "project_id" not in api.last.url.params


def test_get_all_sections_filters_by_project(api: FakeTodoistAPI) -> None:
    api.add("GET", "/sections", json=[])
    assert get_all_sections("tok", 2203306141) == []
    assert api.last.url.params["project_id"] == "2203306141"


@pytest.mark.parametrize(
    "params",
    [
        None,
        SectionParams(name="Groceries"),
        SectionParams(name="Groceries", project_id=0),
        SectionParams(name="", project_id=1),
    ],
)
def test_create_section_requires_name_and_project(api: FakeTodoistAPI, params) -> None:
    with pytest.raises(InvalidInputError):
        create_section("tok", params)
    assert api.requests == []


def test_create_and_get_section(api: FakeTodoistAPI) -> None:
    api.add("POST", "/sections", json={"id": 7025, "project_id": 1, "order": 1, "name": "Groceries"})
    api.add("GET", "/sections/7025", json={"id": 7025, "project_id": 1, "order": 1, "name": "Groceries"})

    created = create_section("tok", SectionParams(name="Groceries", project_id=1))
    fetched = get_section("tok", created.id)

    assert json_body(api.requests[0]) == {"name": "Groceries", "project_id": 1}
    assert fetched == created


def test_update_section_requires_name(api: FakeTodoistAPI) -> None:
    with pytest.raises(InvalidInputError):
        update_section("tok", 7025, SectionParams(project_id=1))


def test_update_section_refetches(api: FakeTodoistAPI) -> None:
    api.add("POST", "/sections/7025", status=204)
    api.add("GET", "/sections/7025", json={"id": 7025, "project_id": 1, "name": "Food"})

    updated = update_section("tok", 7025, SectionParams(name="Food"))

    assert api.calls() == [("POST", "/sections/7025"), ("GET", "/sections/7025")]
    assert updated.name == "Food"


def test_delete_section(api: FakeTodoistAPI) -> None:
    api.add("DELETE", "/sections/7025", status=204)
    delete_section("tok", 7025)

    api.add("DELETE", "/sections/7026", status=202)
    with pytest.raises(UnexpectedStatusError):
        delete_section("tok", 7026)


# ---- labels ----


def test_get_all_labels(api: FakeTodoistAPI) -> None:
    api.add(
        "GET",
        "/labels",
        json=[{"id": 2156154810, "name": "Food", "color": 47, "order": 1, "favorite": False}],
    )
    labels = get_all_labels("tok")
    assert labels[0].name == "Food"
    assert labels[0].color == Color.CHARCOAL


@pytest.mark.parametrize("params", [None, LabelParams(), LabelParams(name=" ")])
def test_create_label_requires_name(api: FakeTodoistAPI, params) -> None:
    with pytest.raises(InvalidInputError):
        create_label("tok", params)
    assert api.requests == []


def test_create_label(api: FakeTodoistAPI) -> None:
    api.add("POST", "/labels", json={"id": 1, "name": "Food", "color": 30, "favorite": True})
    label = create_label("tok", LabelParams(name="Food", color=Color.BERRY_RED, favorite=True))
    assert label.favorite is True
    assert json_body(api.last) == {"name": "Food", "color": 30, "favorite": True}


def test_update_label_refetches(api: FakeTodoistAPI) -> None:
    api.add("POST", "/labels/1", status=204)
    api.add("GET", "/labels/1", json={"id": 1, "name": "Drinks"})

    updated = update_label("tok", 1, LabelParams(name="Drinks"))

    assert api.calls() == [("POST", "/labels/1"), ("GET", "/labels/1")]
    assert updated.name == "Drinks"
    assert get_label("tok", 1).name == "Drinks"


def test_delete_label(api: FakeTodoistAPI) -> None:
    api.add("DELETE", "/labels/1", status=204)
    delete_label("tok", 1)
    assert api.calls() == [("DELETE", "/labels/1")]
