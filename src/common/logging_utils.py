"""Centralized logging helpers.

All entry points call ``configure_logging()`` once; modules obtain their own
logger with ``logging.getLogger(__name__)`` and attach structured context via
``extra=extra_context(...)``. Context fields are rendered after the message as
``key=value`` pairs so DEBUG traces stay greppable.
"""
from __future__ import annotations

import logging
import os
import sys
import time
from typing import Any, Dict, Optional

from constants import Constants

# Keys extra_context() may set on a LogRecord; anything else is ignored by the formatter.
CONTEXT_KEYS = (
    "event",
    "component",
    "action",
    "outcome",
    "specifier",
    "kind",
    "stage",
    "count",
    "command",
    "returncode",
    "duration_ms",
)

_HANDLER_NAME = "goenv-installed"


class ContextFormatter(logging.Formatter):
    """Formatter appending structured context fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        pairs = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                pairs.append(f"{key}={value}")
        if not pairs:
            return base
        return f"{base} [{' '.join(pairs)}]"


def resolve_log_level(cli_level: Optional[str] = None) -> int:
    """Return the effective level: CLI flag > GOENV_DEBUG > env level > default."""
    if cli_level:
        return getattr(logging, str(cli_level).upper(), logging.WARNING)
    if os.environ.get(Constants.ENV_DEBUG):
        return logging.DEBUG
    env_level = os.environ.get(Constants.ENV_LOG_LEVEL, "").strip().upper()
    if env_level in Constants.LOG_LEVELS:
        return getattr(logging, env_level)
    return getattr(logging, Constants.DEFAULT_LOG_LEVEL)


def configure_logging(cli_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Install the stderr handler (once) and apply the effective level."""
    root = logging.getLogger()
    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(ContextFormatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolve_log_level(cli_level))

    if log_file:
        file_handler_name = f"{_HANDLER_NAME}:{os.path.abspath(log_file)}"
        if not any(getattr(h, "name", None) == file_handler_name for h in root.handlers):
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.set_name(file_handler_name)
            file_handler.setFormatter(ContextFormatter(Constants.LOG_FILE_FORMAT))
            root.addHandler(file_handler)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a log call, dropping unset fields."""
    return {k: v for k, v in fields.items() if v is not None}


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds; measured up to now while still running."""
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
