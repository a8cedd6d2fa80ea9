"""structlog setup for the HelloWorld TUI.

Logs go to a file under the workspace; the terminal belongs to Textual.
"""

from __future__ import annotations

import atexit
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

from helloworld_app.services.settings import log_path

__all__ = ["close_logging", "configure_logging", "get_logger"]

_log_file = None


def configure_logging(settings: Optional[Dict[str, Any]] = None) -> Path:
    """Point structlog at the workspace log file. Returns the file path."""
    global _log_file
    settings = settings or {}
    level = getattr(logging, str(settings.get("log_level", "INFO")).upper(), logging.INFO)
    path = log_path(settings)
    path.parent.mkdir(parents=True, exist_ok=True)

    if _log_file is not None:
        _log_file.close()
    _log_file = path.open("a", encoding="utf-8")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )
    return path


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def close_logging() -> None:
    """Close the log file; anything logged afterwards at WARNING or above goes to stderr."""
    global _log_file
    if _log_file is None:
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    _log_file.close()
    _log_file = None


atexit.register(close_logging)
