"""
apphosting Structured Logger

Thin wrapper over the standard logging module that accepts keyword context
on every call and renders it either as ``key=value`` pairs or as JSON.

Usage:
    from apphosting_common import get_logger

    logger = get_logger(__name__)
    logger.info("Lockfile matched", lockfile="pnpm-lock.yaml", version="14.2.3")
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .constants import ENV_LOG_FORMAT, ENV_LOG_LEVEL, LOG_LEVELS

_ROOT_LOGGER_NAME = "apphosting"
_CONTEXT_ATTR = "apphosting_context"


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, _CONTEXT_ATTR, {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human readable formatter appending context as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-7s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, _CONTEXT_ATTR, {})
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            base = f"{base} [{pairs}]"
        return base


class AppHostingLogger:
    """
    Logger accepting structured keyword context.

    Examples:
        >>> logger = AppHostingLogger("resolver")
        >>> logger.debug("Skipping lockfile", lockfile="yarn.lock", reason="missing")
    """

    def __init__(self, name: str):
        if not name.startswith(_ROOT_LOGGER_NAME):
            name = f"{_ROOT_LOGGER_NAME}.{name}"
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, exc_info: bool = False, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, message, exc_info=exc_info, extra={_CONTEXT_ATTR: context})

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: bool = False, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **context)


def get_logger(name: str) -> AppHostingLogger:
    """Return a structured logger under the ``apphosting`` namespace."""
    return AppHostingLogger(name)


def configure_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    """
    Install a stderr handler on the ``apphosting`` root logger.

    Args:
        level: One of LOG_LEVELS. Defaults to $APPHOSTING_LOG_LEVEL, then "info".
        json_format: Emit JSON lines. Defaults to $APPHOSTING_LOG_FORMAT == "json".

    Raises:
        ValueError: If level is not a recognized log level
    """
    level = (level or os.environ.get(ENV_LOG_LEVEL) or "info").lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: '{level}'. Valid levels: {', '.join(LOG_LEVELS)}")
    if json_format is None:
        json_format = os.environ.get(ENV_LOG_FORMAT, "text").lower() == "json"

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else TextFormatter())
    root.addHandler(handler)
    root.setLevel(level.upper())
    root.propagate = False
