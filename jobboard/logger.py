"""
Structured logging for jobboard.

Provides centralized logging with console and file outputs, plus
counters for the queries the data-access layer issues.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json

from . import env


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks query and error counts per repository operation.
    """

    def __init__(
        self,
        name: str = "jobboard",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()

        self.metrics = {
            "queries": 0,
            "operations": {},
            "errors_by_type": {},
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"jobboard_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_query(self, operation: str):
        """Count one SQL statement issued on behalf of `operation`."""
        self.metrics["queries"] += 1
        operations = self.metrics["operations"]
        operations[operation] = operations.get(operation, 0) + 1

    def record_error(self, error_type: str):
        """Count an application error by class name."""
        errors = self.metrics["errors_by_type"]
        errors[error_type] = errors.get(error_type, 0) + 1

    def get_metrics(self) -> dict:
        """Return a copy of the current metrics."""
        return {
            "queries": self.metrics["queries"],
            "operations": dict(self.metrics["operations"]),
            "errors_by_type": dict(self.metrics["errors_by_type"]),
        }

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Query Metrics ===")
        self.info(f"Queries: {metrics['queries']}")

        if metrics["operations"]:
            self.info("Operations:")
            for operation, count in sorted(metrics["operations"].items()):
                self.info(f"  {operation}: {count}")

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "jobboard",
    level: Optional[str] = None,
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Level defaults to LOG_LEVEL. File output is enabled only when LOG_DIR
    is set, unless the caller passes `log_dir`/`enable_file` explicitly.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        if "log_dir" not in kwargs:
            kwargs["log_dir"] = env.log_dir()
        kwargs.setdefault("enable_file", kwargs["log_dir"] is not None)
        _global_logger = StructuredLogger(name=name, level=level or env.log_level(), **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
