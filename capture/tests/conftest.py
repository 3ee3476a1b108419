"""
Shared fixtures for capture tests.

Provides an offline stand-in for the Playwright driver: every browser type
launches the same mocked browser/context/page, and page calls are recorded
in order on `engine.calls`. Screenshots and PDFs write small placeholder
files so tests can assert on the output directory.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from capture.constants import BROWSER_KINDS


@dataclass
class FakeEngine:
    playwright: MagicMock
    browser: AsyncMock
    context: AsyncMock
    page: AsyncMock
    calls: list = field(default_factory=list)

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


def make_fake_engine() -> FakeEngine:
    calls: list = []

    page = AsyncMock()

    async def _set_viewport_size(size):
        calls.append(("set_viewport_size", size["width"], size["height"]))

    async def _goto(url, **kwargs):
        calls.append(("goto", url, kwargs.get("wait_until")))

    async def _evaluate(script, arg=None):
        calls.append(("evaluate", arg))

    async def _wait_for_timeout(ms):
        calls.append(("wait_for_timeout", ms))

    async def _screenshot(path, full_page=False):
        Path(path).write_bytes(b"\x89PNG fake")
        calls.append(("screenshot", Path(path).name, full_page))

    async def _pdf(path, **kwargs):
        Path(path).write_bytes(b"%PDF fake")
        calls.append(("pdf", Path(path).name, kwargs.get("format"), kwargs.get("print_background")))

    page.set_viewport_size = AsyncMock(side_effect=_set_viewport_size)
    page.goto = AsyncMock(side_effect=_goto)
    page.evaluate = AsyncMock(side_effect=_evaluate)
    page.wait_for_timeout = AsyncMock(side_effect=_wait_for_timeout)
    page.screenshot = AsyncMock(side_effect=_screenshot)
    page.pdf = AsyncMock(side_effect=_pdf)

    context = AsyncMock()
    context.new_page = AsyncMock(return_value=page)

    browser = AsyncMock()
    browser.new_context = AsyncMock(return_value=context)

    async def _close():
        calls.append(("close",))

    browser.close = AsyncMock(side_effect=_close)

    playwright = MagicMock()
    for kind in BROWSER_KINDS:

        async def _launch(_kind=kind, **kwargs):
            calls.append(("launch", _kind))
            return browser

        browser_type = MagicMock()
        browser_type.launch = AsyncMock(side_effect=_launch)
        setattr(playwright, kind, browser_type)

    return FakeEngine(playwright=playwright, browser=browser, context=context, page=page, calls=calls)


class FakeDriver:
    """Async context manager standing in for async_playwright()."""

    def __init__(self, playwright: MagicMock) -> None:
        self.playwright = playwright

    async def __aenter__(self) -> MagicMock:
        return self.playwright

    async def __aexit__(self, *exc_info) -> bool:
        return False


@pytest.fixture
def engine() -> FakeEngine:
    return make_fake_engine()


@pytest.fixture
def fake_driver(engine: FakeEngine, monkeypatch: pytest.MonkeyPatch) -> FakeEngine:
    """Patch the runner's async_playwright so run_capture uses `engine`."""
    monkeypatch.setattr("capture.runner.async_playwright", lambda: FakeDriver(engine.playwright))
    return engine


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "screenshots"
    path.mkdir()
    return path


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a viewport config document and return its path."""

    def _write(document, name: str = "viewports.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
