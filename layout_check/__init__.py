"""
Playwright-based layout screenshot check.

Captures full-page desktop and mobile screenshots of a local page and checks
the rendered height of its copyright footer on mobile.

Public API: `from layout_check import take_screenshots, ScreenshotRunner`.
"""

from __future__ import annotations

from layout_check.capture import ViewportCapture, capture_viewport
from layout_check.constants import (
    DESKTOP_VIEWPORT,
    FOOTER_MAX_HEIGHT_PX,
    FOOTER_SELECTOR,
    MOBILE_VIEWPORT,
    SCREENSHOT_FILENAMES,
    SETTLE_DELAY_MS,
    Viewport,
    ViewportSpec,
)
from layout_check.exceptions import LayoutCheckError, TargetPageNotFoundError
from layout_check.footer import FooterMetrics, classify_footer_height, inspect_footer
from layout_check.runner import RunResult, ScreenshotRunner, take_screenshots

__all__ = [
    # constants
    "Viewport",
    "ViewportSpec",
    "DESKTOP_VIEWPORT",
    "MOBILE_VIEWPORT",
    "SCREENSHOT_FILENAMES",
    "SETTLE_DELAY_MS",
    "FOOTER_SELECTOR",
    "FOOTER_MAX_HEIGHT_PX",
    # exceptions
    "LayoutCheckError",
    "TargetPageNotFoundError",
    # footer
    "FooterMetrics",
    "inspect_footer",
    "classify_footer_height",
    # capture
    "ViewportCapture",
    "capture_viewport",
    # runner
    "RunResult",
    "ScreenshotRunner",
    "take_screenshots",
]
