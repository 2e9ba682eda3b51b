"""
One viewport pass: open a context, navigate, settle, capture, inspect the footer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from playwright.async_api import Browser

from layout_check.browser import open_viewport_page
from layout_check.constants import (
    BLANK_SCREENSHOT_BYTES,
    FOOTER_SELECTOR,
    SETTLE_DELAY_MS,
    ViewportSpec,
)
from layout_check.footer import FooterMetrics, inspect_footer
from layout_check.readiness import navigate, settle_page
from layout_check.storage import write_screenshot
from shared.logging import bind_run_context, get_logger

logger = get_logger(__name__)


@dataclass
class ViewportCapture:
    """Result of capturing one viewport."""

    viewport: ViewportSpec
    path: Path
    size_bytes: int
    checksum: str
    # Viewport size Playwright reported for the page at capture time.
    reported_viewport: Optional[dict]
    footer: FooterMetrics
    timings: dict = field(default_factory=dict)


async def capture_viewport(
    browser: Browser,
    url: str,
    viewport: ViewportSpec,
    output_path: Path,
    *,
    settle_ms: int = SETTLE_DELAY_MS,
    footer_selector: str = FOOTER_SELECTOR,
) -> ViewportCapture:
    """
    Capture a full-page PNG of url at viewport and measure the footer.

    The context is closed before returning, on success or failure. Navigation,
    screenshot and write errors propagate.
    """
    bind_run_context(viewport=viewport.name, target=url)

    context, page = await open_viewport_page(browser, viewport)
    try:
        await navigate(page, url)
        timings = await settle_page(page, settle_ms)

        reported_viewport = page.viewport_size
        screenshot_bytes = await page.screenshot(type="png", full_page=True)
        size, checksum = write_screenshot(output_path, screenshot_bytes)
        logger.info(
            "screenshot_saved",
            path=str(output_path),
            size_bytes=size,
            checksum=checksum,
        )
        if size < BLANK_SCREENSHOT_BYTES:
            logger.warning("screenshot_possibly_blank", path=str(output_path), size_bytes=size)

        footer = await inspect_footer(page, footer_selector)
    finally:
        await context.close()

    return ViewportCapture(
        viewport=viewport,
        path=output_path,
        size_bytes=size,
        checksum=checksum,
        reported_viewport=dict(reported_viewport) if reported_viewport else None,
        footer=footer,
        timings=timings,
    )
