"""
Capture constants: browser kinds, navigation policy, artifact formats.
"""

from __future__ import annotations

from typing import Literal

BrowserKind = Literal["chromium", "firefox", "webkit"]
Theme = Literal["light", "dark"]

# Order matters: the first kind is the --browser default.
BROWSER_KINDS: tuple[str, ...] = ("chromium", "firefox", "webkit")
DEFAULT_BROWSER: BrowserKind = "chromium"

# Only Chromium can print to PDF in Playwright.
PDF_BROWSER: BrowserKind = "chromium"

# Navigation completes once no requests are in flight for the engine's idle window.
NAVIGATION_WAIT_UNTIL = "networkidle"

SCREENSHOT_EXTENSION = "png"
PDF_FILENAME_STEM = "output"
PDF_FORMAT = "Letter"
PDF_PRINT_BACKGROUND = True

DEFAULT_ZOOM = 1.0
DEFAULT_DELAY_MS = 0

# Applied via page.evaluate with the zoom factor as the argument.
ZOOM_SCRIPT = "zoom => { document.body.style.zoom = String(zoom); }"
