"""
Structured logging utilities.

Configures the stdlib root logger and routes structlog through it, and
provides a context manager for timed operation logging.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from src.core.config.logging_config import LoggingConfig

logger = structlog.get_logger()


def configure_logging(logging_config: LoggingConfig) -> None:
    """
    Configure stdlib logging and structlog from a LoggingConfig.

    Args:
        logging_config: Level, format and optional file path for log output.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if logging_config.file_path:
        handlers.append(logging.FileHandler(logging_config.file_path))

    logging.basicConfig(
        level=logging_config.level.upper(),
        format=logging_config.format,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def log_operation(
    operation: str,
    **context: Any,
) -> Any:  # AsyncGenerator[None, None]
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.

    Args:
        operation: Name of the operation being performed
        **context: Additional context to include in logs

    Example:
        async with log_operation("slack_delivery", action="created"):
            await client.post(...)
    """
    start_time = time.time()
    log = logger.bind(operation=operation, **context)

    log.info(f"{operation}_started")

    try:
        yield
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        log.error(f"{operation}_failed", error=str(e), latency_ms=latency_ms)
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        log.info(f"{operation}_completed", latency_ms=latency_ms)
