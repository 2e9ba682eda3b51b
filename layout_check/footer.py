"""
Footer inspection: query the footer element, measure it, classify its height.

A missing footer is a valid negative result (visible=False), never an error.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal, Optional

from playwright.async_api import Page

from layout_check.constants import FOOTER_MAX_HEIGHT_PX, FOOTER_SELECTOR
from shared.logging import get_logger

logger = get_logger(__name__)

FooterVerdict = Literal["too_tall", "reasonable", "absent"]

# Returns null when the selector matches nothing.
_FOOTER_METRICS_JS = """
(selector) => {
    const footer = document.querySelector(selector);
    if (!footer) {
        return null;
    }
    const rect = footer.getBoundingClientRect();
    const styles = window.getComputedStyle(footer);
    return {
        height: rect.height,
        width: rect.width,
        bottom: rect.bottom,
        gapToViewportBottom: window.innerHeight - rect.bottom,
        overlapping: rect.bottom > window.innerHeight,
        fontSize: styles.fontSize,
        padding: styles.padding,
        text: (footer.textContent || "").trim(),
    };
}
"""


@dataclass
class FooterMetrics:
    """Rendered footer measurements; numeric fields are None when not visible."""

    visible: bool
    height: Optional[float] = None
    width: Optional[float] = None
    bottom: Optional[float] = None
    text: Optional[str] = None
    font_size: Optional[str] = None
    padding: Optional[str] = None
    gap_to_viewport_bottom: Optional[float] = None
    overlapping: Optional[bool] = None

    @classmethod
    def from_evaluate(cls, raw: Optional[dict]) -> "FooterMetrics":
        """Build metrics from the page.evaluate payload (None when absent)."""
        if not raw:
            return cls(visible=False)
        return cls(
            visible=True,
            height=float(raw["height"]),
            width=float(raw["width"]),
            bottom=float(raw["bottom"]),
            text=raw.get("text", ""),
            font_size=raw.get("fontSize"),
            padding=raw.get("padding"),
            gap_to_viewport_bottom=raw.get("gapToViewportBottom"),
            overlapping=raw.get("overlapping"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


async def inspect_footer(page: Page, selector: str = FOOTER_SELECTOR) -> FooterMetrics:
    """
    Measure the first element matching selector in the page.

    Evaluation errors (page crashed, context closed) propagate.
    """
    raw = await page.evaluate(_FOOTER_METRICS_JS, selector)
    metrics = FooterMetrics.from_evaluate(raw)
    logger.info(
        "footer_inspected",
        selector=selector,
        visible=metrics.visible,
        height=metrics.height,
        width=metrics.width,
    )
    return metrics


def classify_footer_height(
    metrics: FooterMetrics,
    max_height: float = FOOTER_MAX_HEIGHT_PX,
) -> FooterVerdict:
    """Too tall only when height is strictly greater than max_height."""
    if not metrics.visible or metrics.height is None:
        return "absent"
    if metrics.height > max_height:
        return "too_tall"
    return "reasonable"
