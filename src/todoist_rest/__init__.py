"""
Typed client for the Todoist REST API.

Components:
- api/endpoints.py: static registry of named endpoints
- api/client.py: generic call dispatcher (auth, payload placement, status mapping)
- resources/: projects, tasks, sections and labels on top of the dispatcher
- config.py: settings from environment (+ optional .env)
"""

from .api.client import TodoistResponse, close_http_client, make_call, set_http_client
from .config import get_settings, reload_settings, set_default_token
from .errors import (
    APIError,
    BadRequestError,
    DecodeError,
    EndpointNotFoundError,
    ForbiddenError,
    InvalidInputError,
    MissingTokenError,
    NotFoundError,
    TodoistError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from .resources.labels import create_label, delete_label, get_all_labels, get_label, update_label
from .resources.models import (
    Color,
    Label,
    LabelParams,
    Priority,
    Project,
    ProjectParams,
    Section,
    SectionParams,
    Task,
    TaskDue,
    TaskParams,
)
from .resources.projects import (
    create_project,
    delete_project,
    get_all_projects,
    get_project,
    update_project,
)
from .resources.sections import (
    create_section,
    delete_section,
    get_all_sections,
    get_section,
    update_section,
)
from .resources.tasks import (
    close_task,
    create_task,
    delete_task,
    get_active_task,
    get_active_tasks,
    reopen_task,
    update_task,
)

__version__ = "0.1.0"
