"""
Structured logging setup for the viewport capture CLI.

All runtime logging should go through structlog. This module provides one
configuration entrypoint shared by the CLI and the capture pipeline.

Key principles:
- Logs are structured and include contextual fields (url, browser, theme, viewport).
- Console output is colorized and human-readable by default; JSON is available
  for log files and CI.
- Configuration is deterministic and avoids ad-hoc logging configuration
  scattered across the codebase.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

import structlog


def _build_shared_processors(log_format: str = "console") -> list[structlog.types.Processor]:
    """
    Processors shared by every logger in the process.

    Only the final renderer depends on the output format.
    """

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
    ]

    if log_format == "json":
        processors += [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.EventRenamer("message"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    return processors


def _add_handler(root: logging.Logger, handler: logging.Handler, level: int) -> None:
    """Attach `handler` to `root`; structlog has already rendered the message."""
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_stdout: bool = True,
    log_format: str = "console",
) -> None:
    """
    Configure structlog and the standard logging module.

    Called once at process startup by the CLI. Calling it again replaces
    the previous handlers and processors.

    - When log_stdout is True (default), a StreamHandler(sys.stdout) is added.
    - When log_file is set, a FileHandler is added (parent dir created if needed).
    - At least one handler is always added: if both log_stdout=False and log_file
      is unset, stdout is used as fallback so the process never has zero handlers.
    """

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if log_stdout:
        _add_handler(root, logging.StreamHandler(sys.stdout), level)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _add_handler(root, logging.FileHandler(log_file, encoding="utf-8"), level)

    if not root.handlers:
        # Fallback: avoid zero handlers (e.g. LOG_STDOUT=false and LOG_FILE unset)
        _add_handler(root, logging.StreamHandler(sys.stdout), level)

    structlog.configure(
        processors=_build_shared_processors(log_format),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Obtain a structured logger.

    Usage:
        from shared.logging import get_logger, bind_request_context

        logger = get_logger(__name__)
        bind_request_context(url="https://example.com", theme="dark")
        logger.info("capture.started")
    """

    # If configure_logging() has not been called yet, fall back to a
    # minimal configuration to avoid silent failures.
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_request_context(
    *,
    url: Optional[str] = None,
    browser: Optional[str] = None,
    theme: Optional[str] = None,
    viewport: Optional[str] = None,
    **extra: Any,
) -> Mapping[str, Any]:
    """
    Bind common context fields for capture logging.

    This centralizes the convention that logs should include:
    - url
    - browser
    - theme
    - viewport

    Additional keyword arguments are also bound into the logging context.
    """

    context: dict[str, Any] = {
        "url": url,
        "browser": browser,
        "theme": theme,
        "viewport": viewport,
        **extra,
    }

    # Remove keys with None values to keep logs concise.
    filtered_context = {k: v for k, v in context.items() if v is not None}

    structlog.contextvars.bind_contextvars(**filtered_context)
    return filtered_context


def clear_request_context() -> None:
    """Drop all context bound by bind_request_context."""
    structlog.contextvars.clear_contextvars()
