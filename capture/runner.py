"""
Run both capture phases for one set of options.

Screenshots always run; the PDF phase runs afterwards only when requested and
only if screenshots succeeded. The two phases share nothing but the options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from playwright.async_api import Playwright, async_playwright

from capture.options import CaptureOptions
from capture.pdf_export import export_pdf
from capture.screenshots import capture_screenshots
from capture.viewport_config import ViewportSpec
from shared.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)


@dataclass
class CaptureResult:
    """Artifacts written by a run, in the order they were produced."""

    screenshots: list[Path] = field(default_factory=list)
    pdf: Optional[Path] = None

    @property
    def artifacts(self) -> list[Path]:
        return self.screenshots + ([self.pdf] if self.pdf else [])


async def run_capture_with(
    playwright: Playwright,
    options: CaptureOptions,
    viewports: Sequence[ViewportSpec],
    *,
    headless: bool = True,
) -> CaptureResult:
    """Run the screenshot phase, then the PDF phase if `options.pdf`, on `playwright`."""
    clear_request_context()
    bind_request_context(url=options.url, browser=options.browser, theme=options.theme)
    logger.info(
        "capture.started",
        summary=f"Taking screenshots of {options.url} using {options.browser} ({options.theme} mode)",
    )

    result = CaptureResult()
    result.screenshots = await capture_screenshots(
        playwright, options, viewports, headless=headless
    )
    if options.pdf:
        result.pdf = await export_pdf(playwright, options, headless=headless)

    clear_request_context()
    logger.info(
        "capture.completed",
        screenshots=len(result.screenshots),
        pdf=str(result.pdf) if result.pdf else None,
    )
    return result


async def run_capture(
    options: CaptureOptions,
    viewports: Sequence[ViewportSpec],
    *,
    headless: bool = True,
) -> CaptureResult:
    """Start the Playwright driver and run all requested phases."""
    async with async_playwright() as playwright:
        return await run_capture_with(playwright, options, viewports, headless=headless)
