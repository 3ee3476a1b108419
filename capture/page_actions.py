"""
Page steps shared by the screenshot and PDF phases: navigate, zoom, delay, write.

Engine failures are translated into NavigationFailed / CaptureWriteFailed so the
CLI can report them uniformly. Nothing here retries.
"""

from __future__ import annotations

from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from capture.constants import (
    NAVIGATION_WAIT_UNTIL,
    PDF_FORMAT,
    PDF_PRINT_BACKGROUND,
    ZOOM_SCRIPT,
)
from capture.errors import CaptureWriteFailed, NavigationFailed
from shared.logging import get_logger

logger = get_logger(__name__)


def _classify_failure(exc: BaseException) -> str:
    """Short reason for a navigation failure: navigation_timeout, net_err or error."""
    if isinstance(exc, PlaywrightTimeoutError):
        return "navigation_timeout"
    msg = (getattr(exc, "message", None) or str(exc)).lower()
    if "net::err_" in msg or "ns_error_" in msg:
        return "net_err"
    return "error"


async def navigate(page: Page, url: str) -> None:
    """Go to `url` and block until the network is idle."""
    try:
        await page.goto(url, wait_until=NAVIGATION_WAIT_UNTIL)
    except PlaywrightError as e:
        reason = _classify_failure(e)
        logger.warning("navigation.failed", failure_classification=reason, error=str(e))
        raise NavigationFailed(f"Navigation to {url} failed ({reason}): {e}") from e


async def apply_zoom(page: Page, zoom: float) -> None:
    """Set the page's visual zoom. Applied for every value, including 1.0."""
    await page.evaluate(ZOOM_SCRIPT, zoom)


async def wait_for_delay(page: Page, delay_ms: int) -> None:
    """Pause for `delay_ms`; a zero delay skips the wait entirely."""
    if delay_ms > 0:
        logger.debug("capture.delay", delay_ms=delay_ms)
        await page.wait_for_timeout(delay_ms)


async def prepare_page(page: Page, url: str, zoom: float, delay_ms: int) -> None:
    """Navigate, zoom and wait: everything that happens before a snapshot."""
    await navigate(page, url)
    await apply_zoom(page, zoom)
    await wait_for_delay(page, delay_ms)


async def write_screenshot(page: Page, path: Path) -> Path:
    """Capture a full-page PNG to `path`, overwriting any existing file."""
    try:
        await page.screenshot(path=str(path), full_page=True)
    except (PlaywrightError, OSError) as e:
        raise CaptureWriteFailed(f'Could not write screenshot "{path}": {e}') from e
    return path


async def write_pdf(page: Page, path: Path) -> Path:
    """Render the page as a Letter PDF with backgrounds to `path`."""
    try:
        await page.pdf(path=str(path), format=PDF_FORMAT, print_background=PDF_PRINT_BACKGROUND)
    except (PlaywrightError, OSError) as e:
        raise CaptureWriteFailed(f'Could not write PDF "{path}": {e}') from e
    return path
