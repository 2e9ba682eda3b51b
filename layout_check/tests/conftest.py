"""
Shared fixtures for layout check tests: config and mocked Playwright objects.

No browser is launched; Playwright objects are AsyncMock/MagicMock stand-ins.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from shared.config import AppConfig

FOOTER_PAYLOAD = {
    "height": 30.0,
    "width": 390.0,
    "bottom": 844.0,
    "gapToViewportBottom": 0.0,
    "overlapping": False,
    "fontSize": "12px",
    "padding": "8px",
    "text": "© 2024",
}

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"0" * 2000


@pytest.fixture
def index_html(tmp_path: Path) -> Path:
    page = tmp_path / "index.html"
    page.write_text(
        '<footer class="copyright-footer" style="height:30px">© 2024</footer>',
        encoding="utf-8",
    )
    return page


@pytest.fixture
def app_config(tmp_path: Path, index_html: Path) -> AppConfig:
    return AppConfig(
        environment="local",
        log_level="INFO",
        log_file=None,
        log_stdout=False,
        target_page=str(index_html),
        output_dir=str(tmp_path / "out"),
        settle_delay_ms=1000,
        footer_selector=".copyright-footer",
        footer_max_height_px=40.0,
        footer_check_strict=False,
        headless=True,
        chrome_executable=None,
    )


@pytest.fixture
def fake_browser():
    """
    Mocked Browser. Every new_context() call yields a fresh context/page pair
    whose page reports the requested viewport. Created contexts are recorded
    on browser.contexts_created; set browser.footer_payload or
    browser.screenshot_bytes before use to change what pages return.
    """
    browser = MagicMock()
    browser.close = AsyncMock()
    browser.contexts_created = []
    browser.footer_payload = dict(FOOTER_PAYLOAD)
    browser.screenshot_bytes = PNG_BYTES

    async def _new_context(**kwargs):
        page = AsyncMock()
        page.goto = AsyncMock(return_value=None)
        page.wait_for_load_state = AsyncMock()
        page.screenshot = AsyncMock(return_value=browser.screenshot_bytes)
        page.evaluate = AsyncMock(return_value=browser.footer_payload)
        page.viewport_size = dict(kwargs["viewport"])

        context = MagicMock()
        context.close = AsyncMock()
        context.new_page = AsyncMock(return_value=page)
        context.page = page
        context.kwargs = kwargs
        browser.contexts_created.append(context)
        return context

    browser.new_context = AsyncMock(side_effect=_new_context)
    return browser


@pytest.fixture
def fake_playwright(monkeypatch, fake_browser):
    """Patch async_playwright() in the runner; chromium.launch returns fake_browser."""
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=fake_browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(return_value=False)

    monkeypatch.setattr("layout_check.runner.async_playwright", MagicMock(return_value=manager))
    return playwright


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip the real settle delay; returns the mock so tests can inspect calls."""
    sleep = AsyncMock()
    monkeypatch.setattr("layout_check.readiness.asyncio.sleep", sleep)
    return sleep
