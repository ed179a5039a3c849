"""
structlog setup for itch-data.

Logs are written to stderr, so the JSON documents the CLI prints on
stdout can be piped straight into other tools.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from itch_data.config import LoggingConfig, get_settings


def _renderer(config: LoggingConfig) -> "Processor":
    if config.format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog (and stdlib logging) from `LoggingConfig`."""
    config = config or get_settings().logging

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if config.include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))
    processors.append(_renderer(config))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, config.level),
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Logger bound to `initial_context`, e.g. component="build_chain".

    Example:
        >>> logger = get_logger(__name__, component="parsing")
        >>> logger.warning("Unknown enum value", model="Game", field="type")
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
