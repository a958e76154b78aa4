"""
Structured logging for WaitForIt.
"""
from .structured_logger import (
    LogContext,
    LogEntry,
    JSONFormatter,
    HumanFormatter,
    StructuredLogger,
    TimedOperation,
    configure_logging,
    create_logger,
)

__all__ = [
    "LogContext",
    "LogEntry",
    "JSONFormatter",
    "HumanFormatter",
    "StructuredLogger",
    "TimedOperation",
    "configure_logging",
    "create_logger",
]
