# src/todoist_rest/cli/main.py

"""
CLI entrypoint.

Initializes logging from settings, runs one command, prints its output.
"""

from __future__ import annotations

import logging
import sys

from ..api.client import close_http_client
from ..config import get_settings
from ..errors import TodoistError
from ..logging_setup import setup_logging
from .commands import registry

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    if argv is None:
        argv = sys.argv[1:]

    try:
        out = registry.handle(argv)
    except TodoistError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        close_http_client()

    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
