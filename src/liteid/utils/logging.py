"""Logging configuration helpers with Structlog integration.

Key Responsibilities:
    - Configure standard library logging with JSON formatting and field scrubbing
    - Configure Structlog so library modules can emit structured events

Collaborators:
    - Upstream: The CLI and host applications call :func:`configure_logging`
    - Downstream: Relies on ``logging`` and ``structlog``

Side Effects:
    - Configures global logging handlers and the Structlog pipeline

Thread Safety:
    - Logging configuration should be invoked once during process startup
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from typing import Any, Callable

import structlog

from ..config.settings import LoggingSettings

_RESERVED_RECORD_KEYS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# ==============================================================================
# FORMATTERS
# ==============================================================================


class JsonFormatter(logging.Formatter):
    """Formats log records as single line JSON objects."""

    def __init__(self, *, scrub_fields: Iterable[str] | None = None) -> None:
        """Initialise formatter with optional sensitive field scrubbing.

        Args:
            scrub_fields: Iterable of field names (case-insensitive) whose values
                should be replaced with ``***`` in log output.
        """
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S%z")
        self._scrub_fields = {field.lower() for field in scrub_fields or ()}

    def _scrub(self, value: object) -> object:
        """Recursively scrub values in dictionaries and lists."""
        if isinstance(value, dict):
            return {
                k: self._scrub(v) if k.lower() not in self._scrub_fields else "***"
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [self._scrub(item) for item in value]
        return value

    def format(self, record: logging.LogRecord) -> str:
        """Serialise a log record into a JSON string."""
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, self.datefmt),
        }

        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_KEYS:
                continue
            if key.lower() in self._scrub_fields:
                payload[key] = "***"
            else:
                payload[key] = self._scrub(value)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, sort_keys=True, default=str)


# ==============================================================================
# STRUCTLOG PROCESSORS
# ==============================================================================


def _structlog_scrubber(
    scrub_fields: Iterable[str] | None,
) -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a Structlog processor that replaces configured fields with ``***``."""
    lower_fields = {field.lower() for field in scrub_fields or ()}

    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key in list(event_dict.keys()):
            if key.lower() in lower_fields:
                event_dict[key] = "***"
        return event_dict

    return processor


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    settings: LoggingSettings | None = None,
) -> None:
    """Configure global logging for the library and its CLI.

    Args:
        level: Optional logging level or level name. When ``settings`` is
            provided this argument is ignored.
        settings: Optional logging settings object providing level, renderer
            and scrub configuration.

    Note:
        Calling this function reconfigures the root logger and should therefore
        happen once during application startup.
    """
    scrub_fields: Iterable[str] | None = None
    json_output = True
    if settings is not None:
        level = settings.level
        scrub_fields = settings.scrub_fields
        json_output = settings.json_output

    level_value = _resolve_level(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter(scrub_fields=scrub_fields))

    root_logger = logging.getLogger()
    preserved_handlers: list[logging.Handler] = []
    for existing in root_logger.handlers:
        module_attr = getattr(existing.__class__, "__module__", "")
        module: str = module_attr if isinstance(module_attr, str) else ""
        if module.startswith("_pytest."):
            existing.setFormatter(JsonFormatter(scrub_fields=scrub_fields))
            preserved_handlers.append(existing)

    logging.basicConfig(
        level=level_value,
        handlers=[*preserved_handlers, handler],
        force=True,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _structlog_scrubber(scrub_fields),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
