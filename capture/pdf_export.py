"""
PDF phase: a fresh Chromium session that navigates once and prints one Letter PDF.
"""

from __future__ import annotations

from pathlib import Path

from playwright.async_api import Playwright

from capture.browser import browser_session
from capture.constants import PDF_BROWSER
from capture.options import CaptureOptions
from capture.page_actions import prepare_page, write_pdf
from capture.storage import build_pdf_path, resolve_output_dir
from shared.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)


async def export_pdf(
    playwright: Playwright,
    options: CaptureOptions,
    *,
    headless: bool = True,
) -> Path:
    """
    Render `options.url` to {output_dir}/output-{theme}.pdf.

    Always uses PDF_BROWSER regardless of `options.browser`; the resolver has
    already rejected other kinds when --pdf is set. Zoom and delay are applied
    the same way as for screenshots.
    """
    output_dir = resolve_output_dir(options.output_dir)
    path = build_pdf_path(output_dir, options.theme)

    clear_request_context()
    bind_request_context(url=options.url, browser=PDF_BROWSER, theme=options.theme)
    logger.info("pdf.exporting", path=str(path))

    async with browser_session(playwright, PDF_BROWSER, options.theme, headless=headless) as page:
        await prepare_page(page, options.url, options.zoom, options.delay_ms)
        await write_pdf(page, path)

    logger.info("pdf.exported", path=str(path))
    return path
