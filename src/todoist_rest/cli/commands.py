# src/todoist_rest/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import InvalidInputError
from ..resources import labels, projects, sections, tasks
from ..resources.models import LabelParams, ProjectParams, SectionParams, Task, TaskParams

CommandHandler = Callable[[str | None, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple command registry: `<name> [args...]` -> handler(token, args)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, argv: list[str], token: str | None = None) -> str:
        """
        Route argv to a handler and return its output.

        Library errors propagate; the entry point decides how to report them.
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use `help` to list available commands."

        logger.debug("Command %s args=%s", name, args)
        return handler(token, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidInputError(f"not a valid id: {raw!r}") from None


def _one_id(args: list[str], usage: str) -> int:
    if len(args) != 1:
        raise InvalidInputError(f"Usage: {usage}")
    return _parse_id(args[0])


def _text(args: list[str], usage: str) -> str:
    text = " ".join(args).strip()
    if not text:
        raise InvalidInputError(f"Usage: {usage}")
    return text


def _task_line(t: Task) -> str:
    due = f" (due {t.due.string or t.due.date})" if t.due else ""
    return f"{t.id}\tp{int(t.priority)}\t{t.content}{due}"


def cmd_help(token: str | None, args: list[str]) -> str:
    return registry.build_help()


def cmd_projects(token: str | None, args: list[str]) -> str:
    items = projects.get_all_projects(token)
    if not items:
        return "No projects."
    return "\n".join(f"{p.id}\t{p.name}" for p in items)


def cmd_project(token: str | None, args: list[str]) -> str:
    p = projects.get_project(token, _one_id(args, "project <id>"))
    fav = " *" if p.favorite else ""
    return f"{p.id}\t{p.name}{fav}\n{p.url}".rstrip()


def cmd_add_project(token: str | None, args: list[str]) -> str:
    p = projects.create_project(token, ProjectParams(name=_text(args, "add-project <name>")))
    return f"Created project {p.id}: {p.name}"


def cmd_delete_project(token: str | None, args: list[str]) -> str:
    project_id = _one_id(args, "delete-project <id>")
    projects.delete_project(token, project_id)
    return f"Deleted project {project_id}."


def cmd_tasks(token: str | None, args: list[str]) -> str:
    """
    tasks               -> all active tasks
    tasks <project_id>  -> active tasks of one project
    """
    project_id = _parse_id(args[0]) if args else None
    items = tasks.get_active_tasks(token, project_id=project_id)
    if not items:
        return "No active tasks."
    return "\n".join(_task_line(t) for t in items)


def cmd_task(token: str | None, args: list[str]) -> str:
    t = tasks.get_active_task(token, _one_id(args, "task <id>"))
    lines = [_task_line(t)]
    if t.description:
        lines.append(t.description)
    return "\n".join(lines)


def cmd_add_task(token: str | None, args: list[str]) -> str:
    t = tasks.create_task(token, TaskParams(content=_text(args, "add-task <content>")))
    return f"Created task {t.id}: {t.content}"


def cmd_close(token: str | None, args: list[str]) -> str:
    task_id = _one_id(args, "close <id>")
    tasks.close_task(token, task_id)
    return f"Closed task {task_id}."


def cmd_reopen(token: str | None, args: list[str]) -> str:
    task_id = _one_id(args, "reopen <id>")
    tasks.reopen_task(token, task_id)
    return f"Reopened task {task_id}."


def cmd_delete_task(token: str | None, args: list[str]) -> str:
    task_id = _one_id(args, "delete-task <id>")
    tasks.delete_task(token, task_id)
    return f"Deleted task {task_id}."


def cmd_sections(token: str | None, args: list[str]) -> str:
    project_id = _parse_id(args[0]) if args else None
    items = sections.get_all_sections(token, project_id)
    if not items:
        return "No sections."
    return "\n".join(f"{s.id}\t{s.project_id}\t{s.name}" for s in items)


def cmd_add_section(token: str | None, args: list[str]) -> str:
    usage = "add-section <project_id> <name>"
    if len(args) < 2:
        raise InvalidInputError(f"Usage: {usage}")
    params = SectionParams(project_id=_parse_id(args[0]), name=_text(args[1:], usage))
    s = sections.create_section(token, params)
    return f"Created section {s.id}: {s.name}"


def cmd_labels(token: str | None, args: list[str]) -> str:
    items = labels.get_all_labels(token)
    if not items:
        return "No labels."
    return "\n".join(f"{lb.id}\t{lb.name}" for lb in items)


def cmd_add_label(token: str | None, args: list[str]) -> str:
    lb = labels.create_label(token, LabelParams(name=_text(args, "add-label <name>")))
    return f"Created label {lb.id}: {lb.name}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("projects", cmd_projects, help_text="List projects.")
registry.register("project", cmd_project, help_text="Show one project: project <id>.")
registry.register("add-project", cmd_add_project, help_text="Create a project: add-project <name>.")
registry.register("delete-project", cmd_delete_project, help_text="Delete a project: delete-project <id>.")
registry.register("tasks", cmd_tasks, help_text="List active tasks: tasks [project_id].")
registry.register("task", cmd_task, help_text="Show one task: task <id>.")
registry.register("add-task", cmd_add_task, help_text="Create a task: add-task <content>.")
registry.register("close", cmd_close, help_text="Complete a task: close <id>.", aliases=["done"])
registry.register("reopen", cmd_reopen, help_text="Reopen a closed task: reopen <id>.")
registry.register("delete-task", cmd_delete_task, help_text="Delete a task: delete-task <id>.")
registry.register("sections", cmd_sections, help_text="List sections: sections [project_id].")
registry.register(
    "add-section", cmd_add_section, help_text="Create a section: add-section <project_id> <name>."
)
registry.register("labels", cmd_labels, help_text="List labels.")
registry.register("add-label", cmd_add_label, help_text="Create a label: add-label <name>.")
