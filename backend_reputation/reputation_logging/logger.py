"""
structlog setup for the reputation service.

Every record carries an ISO-8601 UTC timestamp, the level, the module that
emitted it and an event_type. Request-scoped keys (the wallet address being
profiled) travel through contextvars, so fetchers running as separate tasks
inherit them without threading a logger through every call.

Imports nothing from backend_reputation; any module may import it first.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, ContextManager

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# "json" for deployments, anything else renders for a terminal
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


def _event_to_event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Log aggregation keys on event_type; structlog emits the name as 'event'."""
    event = event_dict.pop("event", None)
    if event is not None:
        event_dict.setdefault("event_type", event)
    return event_dict


def _renderers() -> list[Any]:
    if LOG_FORMAT == "json":
        return [_event_to_event_type, structlog.processors.JSONRenderer(sort_keys=True)]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            *_renderers(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Module logger; pass snake_case event names and keyword fields.

        logger = get_logger(__name__)
        logger.warning("source_degraded", source="nfts", error="timeout")
    """
    return structlog.get_logger(name).bind(module=name)


def profiling(address: str) -> ContextManager[None]:
    """
    Bind address to every record logged inside the block, including records
    from tasks created inside it (they copy the current context).
    """
    return structlog.contextvars.bound_contextvars(address=address)
