"""
Browser session lifecycle: one browser process, one context, one page.

A session is scoped to a single capture phase and always torn down on exit,
whether the phase succeeded or raised.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import BrowserType, Page, Playwright

from capture.constants import BROWSER_KINDS, Theme
from capture.errors import UnsupportedBrowserKind
from shared.logging import get_logger

logger = get_logger(__name__)


def get_browser_type(playwright: Playwright, browser_kind: str) -> BrowserType:
    """Look up the Playwright browser type for `browser_kind`."""
    if browser_kind not in BROWSER_KINDS:
        raise UnsupportedBrowserKind(f"Unsupported browser type: {browser_kind}")
    return getattr(playwright, browser_kind)


@asynccontextmanager
async def browser_session(
    playwright: Playwright,
    browser_kind: str,
    color_scheme: Theme,
    *,
    headless: bool = True,
) -> AsyncIterator[Page]:
    """
    Launch `browser_kind`, open a context with `color_scheme`, and yield its page.

    The browser is closed on every exit path. A failure while closing is
    logged and does not replace an exception raised inside the block.
    """
    browser_type = get_browser_type(playwright, browser_kind)
    browser = await browser_type.launch(headless=headless)
    logger.debug("browser.launched", browser=browser_kind, headless=headless)
    try:
        context = await browser.new_context(color_scheme=color_scheme)
        page = await context.new_page()
        yield page
    finally:
        try:
            await browser.close()
            logger.debug("browser.closed", browser=browser_kind)
        except Exception as e:
            logger.warning("browser.close_failed", browser=browser_kind, error=str(e))
