"""structlog configuration.

Provides:
- configure_logging(): one-shot structlog setup
- get_logger(): returns a logger bound to a component name

Log lines go to stderr so command output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_CONFIGURED = False


def configure_logging(log_format: str = "console", log_level: str = "INFO") -> None:
    """Configure structlog once; later calls are ignored."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _select_renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # Resolve sys.stderr per logger so redirected streams are honoured.
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> Any:
    """Return a structlog logger pre-bound with ``component``."""
    return structlog.get_logger().bind(component=component)


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)


def _select_renderer(log_format: str) -> Any:
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
