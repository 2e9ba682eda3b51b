"""
Layout check constants: viewport specs, settle delay, footer selector, output names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Viewport = Literal["desktop", "mobile"]


@dataclass(frozen=True)
class ViewportSpec:
    """Viewport size and device-emulation flags applied to a browser context."""

    name: Viewport
    width: int
    height: int
    is_mobile: bool
    has_touch: bool = False
    device_scale_factor: float = 1.0


DESKTOP_VIEWPORT = ViewportSpec(name="desktop", width=1280, height=800, is_mobile=False)
# iPhone 12/14 Pro class device
MOBILE_VIEWPORT = ViewportSpec(
    name="mobile",
    width=390,
    height=844,
    is_mobile=True,
    has_touch=True,
    device_scale_factor=3.0,
)

# Capture order: desktop first, then mobile.
VIEWPORT_SPECS: tuple[ViewportSpec, ...] = (DESKTOP_VIEWPORT, MOBILE_VIEWPORT)

SCREENSHOT_FILENAMES: dict[Viewport, str] = {
    "desktop": "screenshot-desktop.png",
    "mobile": "screenshot-mobile.png",
}

DEFAULT_TARGET_PAGE = "index.html"

# Timing constants (in milliseconds)
SETTLE_DELAY_MS = 1000  # Fixed pause for CSS/JS animations before capture
LOAD_STATE_TIMEOUT_MS = 10000  # Soft cap on waiting for the load event

FOOTER_SELECTOR = ".copyright-footer"
FOOTER_MAX_HEIGHT_PX = 40.0  # Strictly greater than this is "too tall"

# Reported screenshots below this size are almost certainly blank renders.
BLANK_SCREENSHOT_BYTES = 1000
