"""Contextual logging configuration for Magnet MCP.

Log records carry a context string (``operation=...,trace_id=...``) taken
from a context variable, so concurrent tool invocations running on the
same event loop each see their own context.
"""

import logging
import os
import sys
import time
import types
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
NO_CONTEXT = "no-context"

_log_context: ContextVar[dict[str, Any]] = ContextVar("magnet_log_context", default={})


def current_context() -> dict[str, Any]:
    """Return a copy of the context attached to records in the current task."""
    return dict(_log_context.get())


@contextmanager
def log_context(**context: Any) -> Iterator[dict[str, Any]]:
    """Attach context values to every record logged inside the block."""
    token = _log_context.set({**_log_context.get(), **context})
    try:
        yield current_context()
    finally:
        _log_context.reset(token)


def format_context(context: Mapping[str, Any]) -> str:
    """Render context as ``key=value`` pairs, or ``no-context`` when empty."""
    if not context:
        return NO_CONTEXT
    return ",".join(f"{key}={value}" for key, value in context.items())


class ContextualLogger(logging.Logger):
    """Logger whose records include the active logging context."""

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        if extra is None or "context" not in extra:
            extra = {**(extra or {}), "context": format_context(_log_context.get())}
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def set_context(self, **kwargs: Any) -> None:
        """Add key-value pairs to the context of the current task."""
        _log_context.set({**_log_context.get(), **kwargs})

    def clear_context(self) -> None:
        """Drop all context of the current task."""
        _log_context.set({})


class ContextFilter(logging.Filter):
    """Fills ``context`` for records that did not come from a ContextualLogger."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = format_context(_log_context.get())
        return True


class StderrHandler(logging.StreamHandler):
    """Writes to the ``sys.stderr`` current at emit time, not the one seen at setup."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> Any:  # type: ignore[override]
        return sys.stderr


class LoggingContextManager:
    """Scopes an operation: sets its context, logs its start, outcome and duration."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.INFO,
        **context: Any,
    ) -> None:
        """
        Args:
            logger: Logger used for the start and end messages
            operation: Name of the operation
            level: Level of the start message
            **context: Additional context values (``trace_id`` is generated if absent)
        """
        self.logger = logger
        self.operation = operation
        self.level = level
        self.trace_id = context.pop("trace_id", None) or uuid.uuid4().hex[:8]
        self.context = context
        self.start_time = 0.0
        self._token: Token[dict[str, Any]] | None = None

    def __enter__(self) -> "LoggingContextManager":
        self._token = _log_context.set(
            {
                **_log_context.get(),
                **self.context,
                "operation": self.operation,
                "trace_id": self.trace_id,
            }
        )
        self.start_time = time.perf_counter()
        self.logger.log(self.level, f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.perf_counter() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(f"Operation completed: {self.operation} in {duration:.3f}s")
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def setup_logger(
    name: str = "magnet-mcp",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Console output goes to stderr; stdout carries the stdio transport.
    Calling it again replaces the handlers installed by the previous call.

    Args:
        name: Logger name
        level: Log level name, defaults to ``LOG_LEVEL`` or INFO
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files, defaults to ``LOG_DIR`` or ``logs``
        log_format: Record format, defaults to ``LOG_FORMAT``

    Returns:
        Configured contextual logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    handlers: list[logging.Handler] = [StderrHandler()]

    if log_to_file:
        log_directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        log_directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_directory / f"{name}.log",
                maxBytes=MAX_LOG_SIZE,
                backupCount=LOG_BACKUP_COUNT,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ContextFilter())
        logger.addHandler(handler)

    logger.propagate = False
    return cast(ContextualLogger, logger)


def log_operation(
    logger: logging.Logger, operation: str, level: int = logging.INFO, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger to write to
        operation: Name of the operation
        level: Level of the start message
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, level=level, **context)
