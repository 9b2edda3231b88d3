"""Structlog configuration for fixture user runs.

Configures structlog with colored console output for interactive runs
and JSON output for CI.
"""

import os
import sys

import structlog


def configure_logging(json_output: bool | None = None) -> None:
    """Configure structlog with appropriate processors.

    Uses colored console output when FORCE_COLOR is set or stdout is a TTY,
    otherwise JSON output. ``json_output`` overrides the detection.
    """
    if json_output is None:
        # FORCE_COLOR=1 enables colors even in non-TTY environments (like CI logs)
        force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
        json_output = not (force_color or sys.stdout.isatty())

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
