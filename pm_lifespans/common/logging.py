"""Logging setup shared by every layer.

structlog is routed through the standard library so that third-party loggers
and our own end up in the same stream. Positional arguments are formatted
printf-style, so ``logger.info("extracted %d rows", n)`` works as with a
plain ``logging.Logger``. Loggers obtained before ``setup_logging`` runs
pick up the configuration on first use.
"""

import logging
import sys

from typing import Any

import structlog


def setup_logging(level: str | int = "INFO", json_output: bool = False) -> None:
    """Configure structlog and the root logger.

    Args:
        level: Log level name or number
        json_output: Render JSON lines instead of the console renderer
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

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
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
