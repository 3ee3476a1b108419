"""
Environment-based configuration for the viewport capture CLI.

Capture runs are described by command-line flags; this module only covers
process-level settings (logging, browser launch mode, default output
directory). All values are sourced from environment variables with
sensible defaults, optionally loaded from a local `.env` file by the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional

LogFormat = Literal["console", "json"]

DEFAULT_OUTPUT_DIR = "screenshots"


def _bool_env(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or str(default)).strip().lower()
    return raw in ("true", "1", "yes")


@dataclass(frozen=True)
class AppConfig:
    """
    Top-level process configuration.

    Kept deliberately small: anything that describes *what* to capture
    belongs on the command line, not here.
    """

    log_level: str

    # Optional file path for logs; when set, logs are written to file
    # (and stdout if log_stdout).
    log_file: Optional[str]
    # When True, logs go to stdout. When False, only file (if LOG_FILE set).
    log_stdout: bool
    # "console" renders colorized human-readable lines, "json" one object per line.
    log_format: LogFormat

    # Launch browsers without a visible window.
    headless: bool

    # Default for --output when the flag is not given.
    output_dir: str

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Construct configuration from environment variables.

        Fails fast on an unknown LOG_FORMAT instead of guessing.
        """

        log_format = (os.getenv("LOG_FORMAT") or "console").strip().lower()
        if log_format not in {"console", "json"}:
            raise ValueError(f"Unsupported LOG_FORMAT value: {log_format!r}")

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            log_stdout=_bool_env("LOG_STDOUT", True),
            log_format=log_format,  # type: ignore[arg-type]
            headless=_bool_env("HEADLESS", True),
            output_dir=os.getenv("CAPTURE_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
        )


def get_config() -> AppConfig:
    """
    Helper to obtain the current configuration.

    The CLI builds one `AppConfig` at startup and passes the relevant
    values down explicitly; library code should not call this.
    """

    return AppConfig.from_env()
