"""
Unit tests for the capture error taxonomy and user-safe summaries.
"""

from __future__ import annotations

import pytest

from capture import errors
from capture.errors import CaptureError, get_user_safe_error_summary

TAXONOMY = [
    errors.ConfigNotFound,
    errors.ConfigInvalid,
    errors.ConfigSchemaInvalid,
    errors.InvalidZoom,
    errors.InvalidDelay,
    errors.PdfUnsupportedBrowser,
    errors.OutputDirMissing,
    errors.UnsupportedBrowserKind,
    errors.NavigationFailed,
    errors.CaptureWriteFailed,
]


@pytest.mark.parametrize("error_cls", TAXONOMY)
def test_taxonomy_is_terminal_capture_error(error_cls):
    exc = error_cls("detail")

    assert isinstance(exc, CaptureError)
    assert exc.exit_code == 1
    assert str(exc) == "detail"


def test_default_message_is_summary():
    assert str(errors.OutputDirMissing()) == "Output directory does not exist"


def test_summaries_are_distinct():
    assert len({cls.summary for cls in TAXONOMY}) == len(TAXONOMY)


def test_get_user_safe_error_summary():
    assert get_user_safe_error_summary(errors.NavigationFailed("net::ERR_X at https://a")) == (
        "Navigation failed"
    )
    assert get_user_safe_error_summary(RuntimeError("secret detail")) == "Capture failed"
    assert get_user_safe_error_summary(KeyError("x"), fallback="Oops") == "Oops"
