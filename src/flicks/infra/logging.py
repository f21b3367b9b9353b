"""
Logging configuration for flicks.

This module configures structlog on top of the standard library logging
module. JSON output is the default; a console renderer is used when
``FLICKS_LOG_JSON`` is false.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from .settings import Settings, settings


def add_service_context(_, __, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Stamp every event with the service name unless the caller set one."""
    event_dict.setdefault("service", "flicks")
    return event_dict


def configure_logging(config: Settings | None = None) -> None:
    """Configure structlog and the root stdlib handler."""
    config = config or settings
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    renderer: Any
    if config.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a configured logger with service context."""
    logger = structlog.get_logger(name)
    return logger.bind(service="flicks", env=settings.env)
