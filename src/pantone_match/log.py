"""structlog wiring for pantone_match.

Library modules log through standard-library loggers under the
``pantone_match`` namespace, so nothing is printed until an application
attaches a handler. The CLI does that with :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from .config import Settings, get_settings

PACKAGE_LOGGER = "pantone_match"


def setup_logging(settings: Settings | None = None) -> None:
    """Render ``pantone_match`` events to stderr.

    ``log_json`` switches to JSON lines, except in the ``dev`` environment.
    stdout is left alone for command output.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())

    if settings.log_json and settings.environment != "dev":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_context,
    )
