"""
Command-line argument parsing and validation into CaptureOptions.

Validation runs before any browser is launched. argparse handles --help and
usage errors (missing --url/--config, unknown --browser, non-numeric values),
which exit 1 like every other validation failure. Value rules that belong to
the capture error taxonomy (zoom, delay, PDF browser) raise CaptureError
subclasses instead.
"""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from capture.constants import (
    BROWSER_KINDS,
    DEFAULT_BROWSER,
    DEFAULT_DELAY_MS,
    DEFAULT_ZOOM,
    PDF_BROWSER,
    BrowserKind,
    Theme,
)
from capture.errors import EXIT_FAILURE, InvalidDelay, InvalidZoom, PdfUnsupportedBrowser
from shared.config import DEFAULT_OUTPUT_DIR


@dataclass(frozen=True)
class CaptureOptions:
    """Resolved options for one run; shared read-only by both capture phases."""

    url: str
    output_dir: Path
    dark_mode: bool = False
    browser: BrowserKind = DEFAULT_BROWSER
    zoom: float = DEFAULT_ZOOM
    delay_ms: int = DEFAULT_DELAY_MS
    pdf: bool = False

    @property
    def theme(self) -> Theme:
        return "dark" if self.dark_mode else "light"


def _non_empty(value: str) -> str:
    value = value.strip()
    if not value:
        raise argparse.ArgumentTypeError("must not be empty")
    return value


class CaptureArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit 1, like every other validation failure."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser(default_output: str = DEFAULT_OUTPUT_DIR) -> CaptureArgumentParser:
    parser = CaptureArgumentParser(
        prog="capture-viewports",
        description="Capture full-page screenshots of a URL across configured viewport sizes.",
    )
    parser.add_argument("--url", "-u", required=True, type=_non_empty, help="URL to capture")
    parser.add_argument(
        "--output",
        "-o",
        default=default_output,
        help=f"Output directory for screenshots (must exist; default: {default_output})",
    )
    parser.add_argument(
        "--dark",
        "-d",
        action="store_true",
        help="Enable dark theme for screenshots",
    )
    parser.add_argument(
        "--browser",
        "-b",
        default=DEFAULT_BROWSER,
        choices=BROWSER_KINDS,
        help=f"Browser to use (default: {DEFAULT_BROWSER})",
    )
    parser.add_argument(
        "--zoom",
        "-z",
        type=float,
        default=DEFAULT_ZOOM,
        help="Page zoom factor applied before capture (default: 1.0)",
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=DEFAULT_DELAY_MS,
        help="Milliseconds to wait after load before each capture (default: 0)",
    )
    parser.add_argument(
        "--pdf",
        "-p",
        action="store_true",
        help=f"Also export the page as a PDF (requires --browser {PDF_BROWSER})",
    )
    parser.add_argument(
        "--config",
        "-c",
        required=True,
        help="Path to viewport configuration JSON file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override LOG_LEVEL for this run (e.g. DEBUG)",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> CaptureOptions:
    """
    Validate parsed arguments and build CaptureOptions.

    Raises InvalidZoom, InvalidDelay or PdfUnsupportedBrowser. The output
    directory is not checked here; the capture phases resolve it.
    """
    if not math.isfinite(args.zoom) or args.zoom <= 0:
        raise InvalidZoom(f"Zoom must be greater than 0, got {args.zoom}")
    if args.delay < 0:
        raise InvalidDelay(f"Delay must be 0 or greater, got {args.delay}")
    if args.pdf and args.browser != PDF_BROWSER:
        raise PdfUnsupportedBrowser(
            f"PDF export is only supported with {PDF_BROWSER}, got {args.browser}"
        )

    return CaptureOptions(
        url=args.url,
        output_dir=Path(args.output),
        dark_mode=args.dark,
        browser=args.browser,
        zoom=args.zoom,
        delay_ms=args.delay,
        pdf=args.pdf,
    )


def resolve_options(
    argv: Optional[Sequence[str]] = None,
    default_output: str = DEFAULT_OUTPUT_DIR,
) -> tuple[CaptureOptions, argparse.Namespace]:
    """Parse `argv` and return (options, raw namespace). May raise SystemExit via argparse."""
    args = build_parser(default_output).parse_args(argv)
    return options_from_args(args), args
