"""
Screenshot runner: desktop and mobile captures of the page under test plus
the mobile footer height check.

The browser is owned by the runner for the whole run and is closed exactly
once, on success and on failure. Desktop and mobile passes use independent
contexts and run one after the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playwright.async_api import Browser, async_playwright

from layout_check.browser import launch_browser
from layout_check.capture import ViewportCapture, capture_viewport
from layout_check.constants import DESKTOP_VIEWPORT, MOBILE_VIEWPORT, ViewportSpec
from layout_check.footer import FooterVerdict, classify_footer_height
from layout_check.report import (
    print_banner,
    print_capture_saved,
    print_footer_metrics,
    print_summary,
    print_verdict,
    print_viewport_header,
)
from layout_check.storage import build_screenshot_path, resolve_target_url
from shared.config import AppConfig, get_config
from shared.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RunResult:
    """Outcome of one screenshot run."""

    desktop: ViewportCapture
    mobile: ViewportCapture
    # Verdict for the mobile footer; the desktop footer is informational.
    verdict: FooterVerdict

    @property
    def passed(self) -> bool:
        return self.verdict != "too_tall"


class ScreenshotRunner:
    """Runs the desktop + mobile capture sequence for one page."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or get_config()

    async def run(self) -> RunResult:
        """
        Capture both viewports, inspect the footer, print the report.

        Raises TargetPageNotFoundError before launching when the page is
        missing; launch, navigation and write errors propagate after the
        browser is closed.
        """
        url = resolve_target_url(self.config.target_page)
        print_banner()

        async with async_playwright() as playwright:
            browser = await launch_browser(
                playwright,
                headless=self.config.headless,
                chrome_executable=self.config.chrome_executable,
            )
            try:
                desktop = await self._capture(browser, url, DESKTOP_VIEWPORT)
                mobile = await self._capture(browser, url, MOBILE_VIEWPORT)
            finally:
                await browser.close()
                logger.info("browser_closed")

        print_footer_metrics(desktop.footer, heading="Desktop footer (informational):")
        print_footer_metrics(mobile.footer)
        verdict = classify_footer_height(mobile.footer, self.config.footer_max_height_px)
        print_verdict(verdict, mobile.footer)
        print_summary(desktop, mobile)

        return RunResult(desktop=desktop, mobile=mobile, verdict=verdict)

    async def _capture(self, browser: Browser, url: str, viewport: ViewportSpec) -> ViewportCapture:
        print_viewport_header(viewport.name, viewport.width, viewport.height)
        capture = await capture_viewport(
            browser,
            url,
            viewport,
            build_screenshot_path(self.config.output_dir, viewport.name),
            settle_ms=self.config.settle_delay_ms,
            footer_selector=self.config.footer_selector,
        )
        print_capture_saved(capture)
        return capture


async def take_screenshots(config: Optional[AppConfig] = None) -> RunResult:
    """Run the screenshot sequence once with config (or the environment's)."""
    return await ScreenshotRunner(config).run()
