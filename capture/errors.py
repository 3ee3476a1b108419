"""
Capture error taxonomy.

Every failure the CLI reports is a CaptureError subclass. `summary` is a short,
stable, user-safe label; the exception message carries the detail (paths,
values, engine messages) and goes to logs and stderr.
"""

from __future__ import annotations

from typing import Optional

EXIT_FAILURE = 1


class CaptureError(Exception):
    """Base class for all terminal capture failures."""

    summary = "Capture failed"
    exit_code = EXIT_FAILURE

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.summary)


# --- Config Loader ---


class ConfigNotFound(CaptureError):
    summary = "Config file not found"


class ConfigInvalid(CaptureError):
    summary = "Config file is not valid JSON"


class ConfigSchemaInvalid(CaptureError):
    summary = "Config file has an invalid viewports list"


# --- Argument Resolver ---


class InvalidZoom(CaptureError):
    summary = "Zoom must be greater than 0"


class InvalidDelay(CaptureError):
    summary = "Delay must be 0 or greater"


class PdfUnsupportedBrowser(CaptureError):
    summary = "PDF export requires chromium"


# --- Capture phases ---


class OutputDirMissing(CaptureError):
    summary = "Output directory does not exist"


class UnsupportedBrowserKind(CaptureError):
    summary = "Unsupported browser type"


class NavigationFailed(CaptureError):
    summary = "Navigation failed"


class CaptureWriteFailed(CaptureError):
    summary = "Could not write capture output"


def get_user_safe_error_summary(exc: BaseException, fallback: str = "Capture failed") -> str:
    """
    Return the short label for an exception.

    No raw exception messages for anything outside the taxonomy.
    """
    if isinstance(exc, CaptureError):
        return exc.summary
    return fallback
