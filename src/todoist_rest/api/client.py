# src/todoist_rest/api/client.py

"""Generic call dispatcher: endpoint name + params -> authenticated HTTP request."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from ..config import Settings, get_settings
from ..errors import (
    APIError,
    BadRequestError,
    DecodeError,
    EndpointNotFoundError,
    ForbiddenError,
    InvalidInputError,
    MissingTokenError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from .endpoints import Endpoint, get_endpoint

logger = logging.getLogger(__name__)

USER_AGENT = "todoist-rest-python"

_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}

_client: httpx.Client | None = None


@dataclass(frozen=True, slots=True)
class TodoistResponse:
    status_code: int
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise DecodeError("could not parse the response") from e

    def expect_no_content(self) -> None:
        """Delete/close/reopen answer 204 on success; anything else is unexpected."""
        if self.status_code != httpx.codes.NO_CONTENT:
            raise UnexpectedStatusError(self.status_code)


def _make_timeout(settings: Settings) -> httpx.Timeout:
    return httpx.Timeout(
        connect=settings.connect_timeout,
        read=settings.read_timeout,
        write=10.0,
        pool=settings.connect_timeout,
    )


def _get_http_client() -> httpx.Client:
    """
    Lazily create and cache the shared httpx client (connection pool).

    No token is bound to the client: every call attaches its own.
    """
    global _client
    if _client is not None:
        return _client
    _client = httpx.Client(
        timeout=_make_timeout(get_settings()),
        headers={"User-Agent": USER_AGENT},
    )
    return _client


def set_http_client(client: httpx.Client | None) -> None:
    """Install a custom httpx client (proxies, mock transports). None resets to the default."""
    global _client
    _client = client


def close_http_client() -> None:
    global _client
    if _client is not None:
        _client.close()
    _client = None


def _resolve_token(token: str | None) -> str:
    if token and token.strip():
        return token.strip()
    default = get_settings().auth_token
    if default:
        return default
    raise MissingTokenError()


def _fill_path(endpoint: Endpoint, path_params: Mapping[str, Any] | None) -> str:
    # Only whole ":name" segments are placeholders; extra caller keys are ignored.
    given = path_params or {}
    segments: list[str] = []
    missing: list[str] = []
    for seg in endpoint.path.split("/"):
        if seg.startswith(":"):
            value = given.get(seg[1:])
            if value is None:
                missing.append(seg[1:])
                continue
            seg = quote(str(value), safe="")
        segments.append(seg)

    if missing:
        raise InvalidInputError(f"missing path params: {', '.join(sorted(missing))}")
    return "/".join(segments)


def _as_payload(payload: Any) -> Any:
    # Params records know how to serialize themselves (unset fields omitted).
    to_payload = getattr(payload, "to_payload", None)
    if callable(to_payload):
        return to_payload()
    return payload


def _query_params(payload: Any) -> dict[str, str] | None:
    if payload is None:
        return None
    if not isinstance(payload, Mapping):
        raise InvalidInputError("for GET and DELETE, the payload must be a mapping of query params")
    return {str(k): _query_value(v) for k, v in payload.items() if v is not None}


def _query_value(value: Any) -> str:
    # JSON-style booleans, not Python's "True"/"False".
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def make_call(
    token: str | None,
    endpoint_name: str,
    path_params: Mapping[str, Any] | None = None,
    payload: Any = None,
) -> TodoistResponse:
    """
    Issue one API call.

    - token: explicit bearer token; empty/None falls back to the process-wide default.
    - path_params: values for the endpoint's ":name" placeholders.
    - payload: query params for GET/DELETE, JSON body for POST/PUT/PATCH.

    400/401/403/404 raise the matching APIError subclass carrying the response text.
    Any other status is returned as-is for the caller to interpret.
    """
    endpoint = get_endpoint(endpoint_name)
    if endpoint is None:
        raise EndpointNotFoundError(str(endpoint_name))

    bearer = _resolve_token(token)
    path = _fill_path(endpoint, path_params)

    settings = get_settings()
    url = settings.base_url + path

    data = _as_payload(payload)
    params: dict[str, str] | None = None
    body: Any = None
    if endpoint.method.sends_query:
        params = _query_params(data)
    else:
        body = data

    logger.debug("Todoist: %s %s", endpoint.method, path)

    try:
        resp = _get_http_client().request(
            str(endpoint.method),
            url,
            params=params,
            json=body,
            headers={"Authorization": f"Bearer {bearer}"},
        )
    except httpx.HTTPError as e:
        logger.info("Todoist: transport error on %s %s (%s)", endpoint.method, path, e.__class__.__name__)
        raise TransportError(f"{endpoint.method} {path} failed: {e}") from e

    logger.debug("Todoist: %s %s -> %s", endpoint.method, path, resp.status_code)

    error_cls = _STATUS_ERRORS.get(resp.status_code)
    if error_cls is not None:
        text = resp.text.rstrip("\n")
        logger.info("Todoist: %s %s rejected with %s: %s", endpoint.method, path, resp.status_code, text)
        raise error_cls(text, resp.status_code)

    return TodoistResponse(status_code=resp.status_code, body=resp.content)
