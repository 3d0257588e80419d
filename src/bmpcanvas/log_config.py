"""structlog setup shared by the command-line entry point."""

from __future__ import annotations

import sys

import structlog

from bmpcanvas.config import settings


def configure_logging(level: int | None = None) -> None:
    """Configure structlog once for the process.

    Development gets the console renderer; any other ``APP_ENV`` gets JSON.
    Log lines go to stderr so command output on stdout stays parseable.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.dev.ConsoleRenderer()
                if settings.APP_ENV == "development"
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            settings.LOG_LEVEL if level is None else level
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
