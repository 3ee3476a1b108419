#!/usr/bin/env python3
"""
CLI entrypoint: capture full-page screenshots (and optionally a PDF) of a URL
across the viewports listed in a JSON config.

Usage:
    python run_capture.py --url https://example.com --config viewports.json
    python run_capture.py -u https://example.com -c viewports.json --dark --zoom 1.5 --delay 200
    python run_capture.py -u https://example.com -c viewports.json --pdf

Exit codes: 0 on success or --help, 1 on any validation or capture failure
(including argument usage errors).
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from capture.errors import EXIT_FAILURE, CaptureError, get_user_safe_error_summary
from capture.options import resolve_options
from capture.runner import run_capture
from capture.viewport_config import load_viewport_config
from shared.config import AppConfig, get_config
from shared.logging import configure_logging, get_logger


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level: {name!r}")
    return level


def _configure_logging(config: AppConfig, level_name: str) -> None:
    configure_logging(
        level=_level_from_name(level_name),
        log_file=config.log_file,
        log_stdout=config.log_stdout,
        log_format=config.log_format,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, validate inputs, run the capture. Returns the process exit code."""
    load_dotenv()
    try:
        config = get_config()
        _configure_logging(config, config.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger = get_logger(__name__)

    try:
        options, args = resolve_options(argv, default_output=config.output_dir)
        if args.log_level:
            _configure_logging(config, args.log_level)
        viewports = load_viewport_config(args.config)
        result = asyncio.run(run_capture(options, viewports, headless=config.headless))
    except SystemExit as e:
        # --help exits 0; usage errors were already printed by the parser.
        if not e.code:
            raise
        logger.error("capture.failed", error_type="UsageError", error_summary="Invalid arguments")
        return EXIT_FAILURE
    except CaptureError as e:
        logger.error(
            "capture.failed",
            error=str(e),
            error_type=type(e).__name__,
            error_summary=e.summary,
        )
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        logger.error(
            "capture.failed",
            error=str(e),
            error_type=type(e).__name__,
            error_summary=get_user_safe_error_summary(e),
            exc_info=True,
        )
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print("Screenshots captured successfully!")
    for path in result.artifacts:
        print(f"  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
