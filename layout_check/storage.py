"""
Local file helpers: resolve the page under test and write screenshots.

Screenshots at the same path are overwritten deterministically; nothing is
versioned or appended.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from layout_check.constants import SCREENSHOT_FILENAMES, Viewport
from layout_check.exceptions import TargetPageNotFoundError


def resolve_target_url(target_page: str | Path) -> str:
    """
    Resolve target_page against the working directory and return a file:// URL.

    Raises TargetPageNotFoundError when the file does not exist.
    """
    path = Path(target_page).resolve()
    if not path.is_file():
        raise TargetPageNotFoundError(str(path))
    return path.as_uri()


def build_screenshot_path(output_dir: str | Path, viewport: Viewport) -> Path:
    """Path of the screenshot for viewport (does not create anything)."""
    return Path(output_dir) / SCREENSHOT_FILENAMES[viewport]


def write_screenshot(path: Path, image_bytes: bytes) -> tuple[int, str]:
    """
    Write screenshot bytes to disk, replacing any previous file.

    Returns (size_bytes, checksum). May raise OSError on write failure.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(image_bytes)
    size = len(image_bytes)
    checksum = hashlib.md5(image_bytes).hexdigest()
    return size, checksum
