"""
Exceptions raised by the layout check.

Browser launch and Playwright navigation/screenshot errors are not wrapped;
they propagate as Playwright raises them.
"""

from __future__ import annotations


class LayoutCheckError(Exception):
    """Base class for layout check errors."""


class TargetPageNotFoundError(LayoutCheckError):
    """The page under test does not exist on disk."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Target page not found: {path}")
