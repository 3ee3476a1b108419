"""
Playwright-based multi-viewport screenshot and PDF capture.

Public API: re-exports the symbols used by run_capture.py and tests so that
`from capture import ...` stays valid as modules move.
"""

from __future__ import annotations

from capture.browser import browser_session, get_browser_type
from capture.constants import (
    BROWSER_KINDS,
    DEFAULT_BROWSER,
    PDF_BROWSER,
    BrowserKind,
    Theme,
)
from capture.errors import (
    CaptureError,
    CaptureWriteFailed,
    ConfigInvalid,
    ConfigNotFound,
    ConfigSchemaInvalid,
    InvalidDelay,
    InvalidZoom,
    NavigationFailed,
    OutputDirMissing,
    PdfUnsupportedBrowser,
    UnsupportedBrowserKind,
)
from capture.options import CaptureOptions, build_parser, options_from_args, resolve_options
from capture.pdf_export import export_pdf
from capture.runner import CaptureResult, run_capture, run_capture_with
from capture.screenshots import capture_screenshots, capture_viewport
from capture.storage import build_pdf_path, build_screenshot_path, resolve_output_dir
from capture.viewport_config import ViewportSpec, load_viewport_config, parse_viewport_config

__all__ = [
    # constants
    "BrowserKind",
    "Theme",
    "BROWSER_KINDS",
    "DEFAULT_BROWSER",
    "PDF_BROWSER",
    # errors
    "CaptureError",
    "ConfigNotFound",
    "ConfigInvalid",
    "ConfigSchemaInvalid",
    "InvalidZoom",
    "InvalidDelay",
    "PdfUnsupportedBrowser",
    "OutputDirMissing",
    "UnsupportedBrowserKind",
    "NavigationFailed",
    "CaptureWriteFailed",
    # config loader
    "ViewportSpec",
    "load_viewport_config",
    "parse_viewport_config",
    # argument resolver
    "CaptureOptions",
    "build_parser",
    "options_from_args",
    "resolve_options",
    # storage
    "resolve_output_dir",
    "build_screenshot_path",
    "build_pdf_path",
    # browser
    "browser_session",
    "get_browser_type",
    # phases
    "capture_viewport",
    "capture_screenshots",
    "export_pdf",
    "CaptureResult",
    "run_capture",
    "run_capture_with",
]
