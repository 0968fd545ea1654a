"""
Structured logging for semcmp.

The library itself only logs at declaration time (comparator registration
and derivation); comparing and sorting stay silent. Applications, the semcmp
CLI included, opt in by calling configure_logging() or
configure_from_settings().
"""

import logging
import sys
import time
from typing import Any, TextIO

import structlog

from semcmp.kernel.settings import Settings


def _processors(json_output: bool) -> list[structlog.types.Processor]:
    """Processor chain: shared enrichment, then a renderer"""
    chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        chain += [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ]
    return chain


def configure_logging(
    *,
    json_output: bool = False,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Safe to call repeatedly; each call replaces the previous handlers.

    Args:
        json_output: One JSON object per line instead of console lines
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Destination, stderr by default so stdout stays free for
                command output
    """
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_from_settings(settings: Settings, stream: TextIO | None = None) -> None:
    """Apply the log_level and json_logs fields of a Settings instance"""
    configure_logging(
        json_output=settings.json_logs,
        log_level=settings.log_level,
        stream=stream,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for the given module.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


class LogOperation:
    """
    Time a collection operation and log how it ended

    DEBUG on entry, INFO with duration_ms on success, ERROR on failure.
    When the failure is an incompatible pair, the operand types are logged
    too, which is usually enough to find the stray value in a large input.
    Exceptions always propagate.
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        **context: Any,
    ):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time = 0.0

    def __enter__(self) -> "LogOperation":
        self.start_time = time.perf_counter()
        self.logger.debug(f"{self.operation} started", operation=self.operation, **self.context)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        fields = dict(
            self.context,
            operation=self.operation,
            duration_ms=round((time.perf_counter() - self.start_time) * 1000, 2),
        )
        if exc_type is None:
            self.logger.info(f"{self.operation} completed", **fields)
            return

        fields.update(error_type=exc_type.__name__, error=str(exc_val))
        if hasattr(exc_val, "left") and hasattr(exc_val, "right"):
            fields.update(
                left_type=type(exc_val.left).__qualname__,
                right_type=type(exc_val.right).__qualname__,
            )
        self.logger.error(f"{self.operation} failed", **fields)
