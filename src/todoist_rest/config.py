# src/todoist_rest/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole process.
- No secrets required at import time (the token is only checked per call).
- The default auth token can be replaced at runtime for single-user scripts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODOIST"

DEFAULT_BASE_URL = "https://api.todoist.com/rest/v1"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def load_local_env() -> bool:
    """
    Load .env from the working directory (or its parents).

    Searched from cwd, so an installed CLI uses the .env of the directory
    it runs in. Real environment wins.
    """
    return load_dotenv(find_dotenv(usecwd=True), override=False)


load_local_env()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Auth ----
    auth_token: Optional[str]

    # ---- HTTP ----
    base_url: str
    connect_timeout: float
    read_timeout: float

    # ---- Logging (CLI) ----
    log_level: str
    log_dir: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        auth_token = _first_env(_k("AUTH_TOKEN"), _k("API_TOKEN"), default=None)
        if auth_token is not None:
            auth_token = auth_token.strip()

        base_url = _env(_k("BASE_URL"), DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL

        connect_timeout = _env_float(_k("CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout = _env_float(_k("READ_TIMEOUT_SECONDS"), 30.0)

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"))

        return Settings(
            auth_token=auth_token,
            base_url=base_url.rstrip("/"),
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            log_level=log_level,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS


def reload_settings() -> Settings:
    """Re-read the environment (useful after changing os.environ)."""
    global SETTINGS
    SETTINGS = Settings.from_env()
    return SETTINGS


def set_default_token(token: str | None) -> None:
    """
    Replace the process-wide default token.

    Meant for single-user use; multi-user callers should pass the token
    explicitly to every call instead.
    """
    global SETTINGS
    SETTINGS = replace(SETTINGS, auth_token=(token or "").strip() or None)
