# src/todoist_rest/resources/models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any


class Priority(IntEnum):
    """Task priority as the API encodes it (1 = normal ... 4 = urgent)."""

    NORMAL = 1
    HIGH = 2
    HIGHER = 3
    URGENT = 4

    @classmethod
    def from_api(cls, raw: Any) -> Priority:
        try:
            return cls(int(raw))
        except (TypeError, ValueError):
            return cls.NORMAL


_COLOR_HEX: dict[int, str] = {
    30: "#b8256f",
    31: "#db4035",
    32: "#ff9933",
    33: "#fad000",
    34: "#afb83b",
    35: "#7ecc49",
    36: "#299438",
    37: "#6accbc",
    38: "#158fad",
    39: "#14aaf5",
    40: "#96c3eb",
    41: "#4073ff",
    42: "#884dff",
    43: "#af38eb",
    44: "#eb96eb",
    45: "#e05194",
    46: "#ff8d85",
    47: "#808080",
    48: "#b8b8b8",
    49: "#ccac93",
}


class Color(IntEnum):
    """Standard palette ids for projects and labels."""

    BERRY_RED = 30
    RED = 31
    ORANGE = 32
    YELLOW = 33
    OLIVE_GREEN = 34
    LIME_GREEN = 35
    GREEN = 36
    MINT_GREEN = 37
    TEAL = 38
    SKY_BLUE = 39
    LIGHT_BLUE = 40
    BLUE = 41
    GRAPE = 42
    VIOLET = 43
    LAVENDER = 44
    MAGENTA = 45
    SALMON = 46
    CHARCOAL = 47
    GREY = 48
    TAUPE = 49

    @property
    def hex(self) -> str:
        return _COLOR_HEX[self.value]


# ---- decoding helpers (API JSON is trusted for shape, not for completeness) ----

def _int(data: Mapping[str, Any], key: str) -> int:
    raw = data.get(key)
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0


def _str(data: Mapping[str, Any], key: str) -> str:
    raw = data.get(key)
    return "" if raw is None else str(raw)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    return bool(data.get(key) or False)


def _int_list(data: Mapping[str, Any], key: str) -> list[int]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"{key} must be a list, got {type(raw).__name__}")
    out: list[int] = []
    for item in raw:
        if item is None or isinstance(item, bool):
            raise ValueError(f"{key} must hold integers, got {item!r}")
        out.append(int(item))
    return out


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


# ---- read side ----

@dataclass(slots=True)
class Project:
    id: int
    name: str
    comment_count: int = 0
    order: int = 0
    color: int = 0
    shared: bool = False
    sync_id: int = 0
    favorite: bool = False
    inbox_project: bool = False
    url: str = ""
    team_inbox: bool = False
    parent_id: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Project:
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            comment_count=_int(data, "comment_count"),
            order=_int(data, "order"),
            color=_int(data, "color"),
            shared=_bool(data, "shared"),
            sync_id=_int(data, "sync_id"),
            favorite=_bool(data, "favorite"),
            inbox_project=_bool(data, "inbox_project"),
            url=_str(data, "url"),
            team_inbox=_bool(data, "team_inbox"),
            parent_id=_int(data, "parent_id"),
        )


@dataclass(slots=True)
class TaskDue:
    date: str = ""
    datetime: str = ""
    recurring: bool = False
    string: str = ""
    timezone: str = ""

    @classmethod
    def from_api(cls, data: Mapping[str, Any] | None) -> TaskDue | None:
        if not data:
            return None
        return cls(
            date=_str(data, "date"),
            datetime=_str(data, "datetime"),
            recurring=_bool(data, "recurring"),
            string=_str(data, "string"),
            timezone=_str(data, "timezone"),
        )


@dataclass(slots=True)
class Task:
    id: int
    content: str
    project_id: int = 0
    section_id: int = 0
    description: str = ""
    completed: bool = False
    label_ids: list[int] = field(default_factory=list)
    parent_id: int = 0
    order: int = 0
    priority: Priority = Priority.NORMAL
    due: TaskDue | None = None
    url: str = ""
    comment_count: int = 0
    assignee: int = 0
    assigner: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Task:
        due = data.get("due")
        return cls(
            id=_int(data, "id"),
            content=_str(data, "content"),
            project_id=_int(data, "project_id"),
            section_id=_int(data, "section_id"),
            description=_str(data, "description"),
            completed=_bool(data, "completed"),
            label_ids=_int_list(data, "label_ids"),
            parent_id=_int(data, "parent_id"),
            order=_int(data, "order"),
            priority=Priority.from_api(data.get("priority")),
            due=TaskDue.from_api(due if isinstance(due, Mapping) else None),
            url=_str(data, "url"),
            comment_count=_int(data, "comment_count"),
            assignee=_int(data, "assignee"),
            assigner=_int(data, "assigner"),
        )


@dataclass(slots=True)
class Section:
    id: int
    name: str
    project_id: int = 0
    order: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Section:
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            project_id=_int(data, "project_id"),
            order=_int(data, "order"),
        )


@dataclass(slots=True)
class Label:
    id: int
    name: str
    color: int = 0
    order: int = 0
    favorite: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Label:
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            color=_int(data, "color"),
            order=_int(data, "order"),
            favorite=_bool(data, "favorite"),
        )


# ---- write side: None means "leave unset" and is never sent ----

@dataclass(slots=True)
class ProjectParams:
    name: str | None = None
    parent_id: int | None = None
    color: int | None = None
    favorite: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(asdict(self))


@dataclass(slots=True)
class TaskParams:
    content: str | None = None
    description: str | None = None
    project_id: int | None = None
    section_id: int | None = None
    parent_id: int | None = None
    order: int | None = None
    label_ids: list[int] | None = None
    priority: Priority | None = None
    assignee: int | None = None

    # Due info is flattened for create/update calls.
    due_string: str | None = None
    due_date: str | None = None
    due_datetime: str | None = None
    due_lang: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = _compact(asdict(self))
        if self.priority is not None:
            payload["priority"] = int(self.priority)
        return payload


@dataclass(slots=True)
class SectionParams:
    name: str | None = None
    project_id: int | None = None
    order: int | None = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(asdict(self))


@dataclass(slots=True)
class LabelParams:
    name: str | None = None
    color: int | None = None
    order: int | None = None
    favorite: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(asdict(self))
