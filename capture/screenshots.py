"""
Screenshot phase: one browser session, viewports captured strictly in list order.

The first failing viewport aborts the phase; screenshots already written stay on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from playwright.async_api import Page, Playwright

from capture.browser import browser_session
from capture.options import CaptureOptions
from capture.page_actions import prepare_page, write_screenshot
from capture.storage import build_screenshot_path, resolve_output_dir
from capture.viewport_config import ViewportSpec
from shared.logging import bind_request_context, get_logger

logger = get_logger(__name__)


async def capture_viewport(
    page: Page,
    options: CaptureOptions,
    viewport: ViewportSpec,
    output_dir: Path,
) -> Path:
    """Resize, navigate, zoom, wait and snapshot a single viewport."""
    bind_request_context(viewport=viewport.name)
    logger.info("viewport.capturing", width=viewport.width, height=viewport.height)

    await page.set_viewport_size(viewport.size)
    await prepare_page(page, options.url, options.zoom, options.delay_ms)

    path = build_screenshot_path(output_dir, viewport.name, options.theme)
    await write_screenshot(page, path)

    logger.info("viewport.captured", path=str(path))
    return path


async def capture_screenshots(
    playwright: Playwright,
    options: CaptureOptions,
    viewports: Sequence[ViewportSpec],
    *,
    headless: bool = True,
) -> list[Path]:
    """
    Capture every viewport of `viewports` with `options.browser`.

    Raises OutputDirMissing before launching anything when the output
    directory is absent. Returns the written paths in capture order.
    """
    output_dir = resolve_output_dir(options.output_dir)

    bind_request_context(url=options.url, browser=options.browser, theme=options.theme)
    logger.info(
        "screenshots.started",
        output_dir=str(output_dir),
        viewports=len(viewports),
        zoom=options.zoom,
        delay_ms=options.delay_ms,
    )

    written: list[Path] = []
    async with browser_session(
        playwright, options.browser, options.theme, headless=headless
    ) as page:
        for viewport in viewports:
            written.append(await capture_viewport(page, options, viewport, output_dir))

    logger.info("screenshots.completed", count=len(written))
    return written
