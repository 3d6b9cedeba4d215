"""
Structured logging for Contract Guard, built on structlog.

configure_logging() reads LOG_LEVEL / LOG_FORMAT through config.env, so a
project-root .env applies to logging the same way it applies to Settings.
It runs once on first import and can be called again (tests, CLI) to
redirect or re-level output. Rendered lines go to stderr by default so
scan verdicts on stdout stay machine-readable.

JSON line shape:
    {"event_type": "analyze_done", "risk_level": "HIGH", "logger": "...",
     "level": "info", "timestamp": "2026-01-01T00:00:00.000000Z"}
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from contract_guard.config.env import get_log_format, get_log_level


def _rename_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict["event_type"] = event_dict.pop("event", "")
    return event_dict


def configure_logging(
    level: str | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """(Re)configure structlog; unset arguments come from the environment."""
    level_name = (level or get_log_level()).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if (fmt or get_log_format()) == "json":
        processors += [_rename_event, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    out = stream if stream is not None else sys.stderr
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Logger for a module; every line carries logger=<name>."""
    return structlog.get_logger(name).bind(logger=name)


def bind_request(request_id: str) -> structlog.typing.FilteringBoundLogger:
    """Logger with request_id bound, one per HTTP request."""
    return get_logger("contract_guard.request").bind(request_id=request_id)
