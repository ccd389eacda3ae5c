# src/todoist_rest/errors.py

"""Exception hierarchy raised by the client.

Everything derives from TodoistError so callers can catch one type.
"""

from __future__ import annotations


class TodoistError(Exception):
    """Base class for all client errors."""


class EndpointNotFoundError(TodoistError):
    def __init__(self, name: str) -> None:
        super().__init__("endpoint not found")
        self.name = name


class InvalidInputError(TodoistError, ValueError):
    """Missing required field or malformed call arguments (raised before any request)."""


class MissingTokenError(TodoistError):
    """No explicit token and no process-wide default token."""

    def __init__(self, message: str = "Empty token") -> None:
        super().__init__(message)


class TransportError(TodoistError):
    """Network / timeout failure while talking to the API."""


class APIError(TodoistError):
    """
    The API rejected the request.

    `text` is the raw response body with trailing newlines trimmed; Todoist
    answers errors with a short plain-text message.
    """

    status_code: int = 0

    def __init__(self, text: str, status_code: int | None = None) -> None:
        super().__init__(text)
        self.text = text
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(APIError):
    status_code = 400


class UnauthorizedError(APIError):
    status_code = 401


class ForbiddenError(APIError):
    status_code = 403


class NotFoundError(APIError):
    status_code = 404


class DecodeError(TodoistError):
    """Response body is not the JSON we expected."""


class UnexpectedStatusError(TodoistError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"received status code {status_code}")
        self.status_code = status_code
