"""
Human-readable console report. Not a stable or parseable format.
"""

from __future__ import annotations

from typing import Optional

from layout_check.capture import ViewportCapture
from layout_check.footer import FooterMetrics, FooterVerdict


def _px(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.1f} px"


def print_banner() -> None:
    print("🎨 Layout Screenshot Test")
    print("========================")


def print_viewport_header(capture_name: str, width: int, height: int) -> None:
    print(f"\n📱 Testing {capture_name.capitalize()} Layout ({width}x{height})...")


def print_capture_saved(capture: ViewportCapture) -> None:
    print(f"✅ {capture.viewport.name.capitalize()} screenshot saved to {capture.path}")


def print_footer_metrics(footer: FooterMetrics, heading: str = "Copyright footer check:") -> None:
    print(f"\n{heading}")
    print(f"- Visible: {footer.visible}")
    print(f"- Height: {_px(footer.height)}")
    print(f"- Width: {_px(footer.width)}")
    print(f"- Text: {footer.text if footer.text is not None else 'n/a'}")
    if footer.visible:
        print(f"- Font size: {footer.font_size}")
        print(f"- Padding: {footer.padding}")
        print(f"- Gap to viewport bottom: {_px(footer.gap_to_viewport_bottom)}")
        if footer.overlapping:
            print("- Overlapping viewport bottom: yes")


def print_verdict(verdict: FooterVerdict, footer: FooterMetrics) -> None:
    if verdict == "too_tall":
        print(f"⚠️  Footer height ({_px(footer.height)}) might be too tall for mobile")
    elif verdict == "reasonable":
        print(f"✅ Footer height ({_px(footer.height)}) is reasonable")
    else:
        print("ℹ️  Footer not found; height check skipped")


def print_summary(desktop: ViewportCapture, mobile: ViewportCapture) -> None:
    print(f"\nScreenshots saved! Check {desktop.path.name} and {mobile.path.name}")
