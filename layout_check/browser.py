"""
Browser launch options and per-viewport context creation.
"""

from __future__ import annotations

from typing import Any, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright

from layout_check.constants import ViewportSpec
from shared.logging import get_logger

logger = get_logger(__name__)


def build_launch_options(
    headless: bool = True,
    chrome_executable: Optional[str] = None,
) -> dict[str, Any]:
    """Keyword arguments for chromium.launch()."""
    options: dict[str, Any] = {"headless": headless}
    if chrome_executable:
        options["executable_path"] = chrome_executable
    return options


async def launch_browser(
    playwright: Playwright,
    headless: bool = True,
    chrome_executable: Optional[str] = None,
) -> Browser:
    """
    Launch Chromium. Launch errors propagate to the caller.
    """
    options = build_launch_options(headless, chrome_executable)
    browser = await playwright.chromium.launch(**options)
    logger.info(
        "browser_launched",
        headless=headless,
        executable_override=chrome_executable is not None,
    )
    return browser


async def create_browser_context(
    browser: Browser,
    viewport: ViewportSpec,
) -> BrowserContext:
    """
    Create an isolated browser context emulating the given viewport.

    is_mobile / has_touch must be set at context creation; Playwright cannot
    change them on an existing page.
    """
    return await browser.new_context(
        viewport={"width": viewport.width, "height": viewport.height},
        is_mobile=viewport.is_mobile,
        has_touch=viewport.has_touch,
        device_scale_factor=viewport.device_scale_factor,
    )


async def open_viewport_page(
    browser: Browser,
    viewport: ViewportSpec,
) -> tuple[BrowserContext, Page]:
    """Create a context for the viewport and open one page in it."""
    context = await create_browser_context(browser, viewport)
    try:
        page = await context.new_page()
    except Exception:
        await context.close()
        raise
    return context, page
