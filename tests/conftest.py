# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

import pytest

from todoist_rest import config
from todoist_rest.api.client import set_http_client
from todoist_rest.config import Settings

from .fakes import FakeTodoistAPI


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Deterministic settings with a default token.

    We patch the module-level object rather than the environment, so a
    developer's real TODOIST_AUTH_TOKEN never leaks into tests.
    """
    s = Settings(
        auth_token="default-token",
        base_url="https://api.todoist.test/rest/v1",
        connect_timeout=1.0,
        read_timeout=1.0,
        log_level="WARNING",
        log_dir=None,
    )
    monkeypatch.setattr(config, "SETTINGS", s)
    return s


@pytest.fixture()
def no_default_token(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "SETTINGS", replace(settings, auth_token=None))


@pytest.fixture()
def api(settings: Settings) -> Iterator[FakeTodoistAPI]:
    """FakeTodoistAPI installed as the shared HTTP client."""
    fake = FakeTodoistAPI()
    client = fake.client()
    set_http_client(client)
    try:
        yield fake
    finally:
        set_http_client(None)
        client.close()
