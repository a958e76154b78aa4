"""
Structured logging for WaitForIt.

Provides consistent, structured logging with:
- JSON output for production
- Human-readable output for development
- Context tracking (correlation_id, component, operation)
- Operation timing
"""
import logging
import json
import sys
import time
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from pathlib import Path

from textual.logging import TextualHandler

ROOT_LOGGER_NAME = "waitforit"


@dataclass
class LogContext:
    """Context for structured logging."""
    correlation_id: Optional[str] = None
    component: Optional[str] = None
    operation: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_operation(self, operation: str) -> 'LogContext':
        """Return new context with operation set."""
        return LogContext(
            correlation_id=self.correlation_id,
            component=self.component,
            operation=operation,
            extra=self.extra.copy(),
        )

    def with_extra(self, **kwargs) -> 'LogContext':
        """Return new context with additional data."""
        new_extra = self.extra.copy()
        new_extra.update(kwargs)
        return LogContext(
            correlation_id=self.correlation_id,
            component=self.component,
            operation=self.operation,
            extra=new_extra,
        )


@dataclass
class LogEntry:
    """Structured log entry."""
    timestamp: str
    level: str
    message: str
    logger: Optional[str] = None
    component: Optional[str] = None
    correlation_id: Optional[str] = None
    operation: Optional[str] = None
    duration_ms: Optional[float] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        """Convert to JSON string."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if not data.get('extra'):
            data.pop('extra', None)
        return json.dumps(data, default=str)

    def to_human(self) -> str:
        """Convert to human-readable string."""
        parts = [
            f"[{self.timestamp}]",
            f"[{self.level}]",
            f"[{self.component or self.logger}]",
            self.message,
        ]

        if self.duration_ms is not None:
            parts.append(f"({self.duration_ms:.2f}ms)")

        if self.error:
            parts.append(f"ERROR: {self.error}")

        return " ".join(parts)


def _error_fields(record: logging.LogRecord):
    if not record.exc_info or record.exc_info[1] is None:
        return None, None
    exc_type, exc_value = record.exc_info[0], record.exc_info[1]
    return str(exc_value), exc_type.__name__ if exc_type else None


class JSONFormatter(logging.Formatter):
    """JSON log formatter for production."""

    def format(self, record: logging.LogRecord) -> str:
        error, error_type = _error_fields(record)
        entry = LogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=record.levelname,
            message=record.getMessage(),
            logger=record.name,
            component=getattr(record, 'component', None),
            correlation_id=getattr(record, 'correlation_id', None),
            operation=getattr(record, 'operation', None),
            duration_ms=getattr(record, 'duration_ms', None),
            error=error,
            error_type=error_type,
            extra=getattr(record, 'extra', {}),
        )
        return entry.to_json()


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for development."""

    def format(self, record: logging.LogRecord) -> str:
        error, _ = _error_fields(record)
        entry = LogEntry(
            timestamp=datetime.now().strftime("%H:%M:%S"),
            level=record.levelname,
            message=record.getMessage(),
            logger=record.name,
            component=getattr(record, 'component', None),
            duration_ms=getattr(record, 'duration_ms', None),
            error=error,
        )
        return entry.to_human()


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Path] = None,
    textual: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Every `waitforit.*` logger, structured or plain, propagates here.
    Calling this again replaces the previous handlers.

    With `textual=True` console records go to the running Textual app
    instead of stderr, which the app draws its screen on.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if textual:
        console_handler = TextualHandler()
    else:
        console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(JSONFormatter() if json_output else HumanFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


class StructuredLogger:
    """
    Structured logger for one component.

    Usage:
        logger = StructuredLogger("fetcher")

        ctx = LogContext(correlation_id="abc123")
        logger.info("Loading joke", ctx)

        with logger.timed_operation("load_joke", ctx):
            await client.fetch()
    """

    def __init__(self, component: str):
        self._component = component
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")

    @property
    def component(self) -> str:
        return self._component

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[LogContext] = None,
        duration_ms: Optional[float] = None,
        exc_info: bool = False,
        **kwargs,
    ) -> None:
        """Internal log method."""
        extra = {
            'component': self._component,
            'duration_ms': duration_ms,
            'extra': kwargs,
        }

        if context:
            extra['correlation_id'] = context.correlation_id
            extra['operation'] = context.operation
            extra['extra'].update(context.extra)

        self._logger.log(level, message, extra=extra, exc_info=exc_info)

    def debug(self, message: str, context: Optional[LogContext] = None, **kwargs) -> None:
        self._log(logging.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[LogContext] = None, **kwargs) -> None:
        self._log(logging.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[LogContext] = None, **kwargs) -> None:
        self._log(logging.WARNING, message, context, **kwargs)

    def error(
        self,
        message: str,
        context: Optional[LogContext] = None,
        exc_info: bool = True,
        **kwargs,
    ) -> None:
        self._log(logging.ERROR, message, context, exc_info=exc_info, **kwargs)

    def timed_operation(
        self,
        operation: str,
        context: Optional[LogContext] = None,
    ) -> 'TimedOperation':
        """Context manager for timing operations."""
        return TimedOperation(self, operation, context)


class TimedOperation:
    """Context manager for timing operations. Never suppresses exceptions."""

    def __init__(
        self,
        logger: StructuredLogger,
        operation: str,
        context: Optional[LogContext] = None,
    ):
        self._logger = logger
        self._operation = operation
        self._context = context.with_operation(operation) if context else LogContext(operation=operation)
        self._start: Optional[float] = None

    def __enter__(self):
        self._start = time.monotonic()
        self._logger.debug(f"Starting {self._operation}", self._context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (time.monotonic() - self._start) * 1000

        if exc_type:
            # Expected failures are reported by the caller; no traceback here.
            self._logger.warning(
                f"Failed {self._operation}: {exc_type.__name__}: {exc_val}",
                self._context,
                duration_ms=duration_ms,
            )
        else:
            self._logger.info(
                f"Completed {self._operation}",
                self._context,
                duration_ms=duration_ms,
            )

        return False


def create_logger(
    component: str,
    level: str = "INFO",
    json_output: bool = False,
    log_dir: Optional[str] = None,
    textual: bool = False,
) -> StructuredLogger:
    """Factory function: configure package logging and return a component logger."""
    log_file = None
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / "waitforit.log"

    configure_logging(
        level=level, json_output=json_output, log_file=log_file, textual=textual
    )
    return StructuredLogger(component)
