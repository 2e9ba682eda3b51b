"""
Environment-based configuration for the layout screenshot check.

This module exposes a small, typed configuration surface read once at
startup. All values are sourced from environment variables; the defaults
reproduce the fixed behaviour of the check (index.html in the working
directory, 1 s settle delay, 40 px footer threshold, advisory verdict).

Local overrides can be kept in a `.env` file, which the script entry point
loads with python-dotenv.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional

Environment = Literal["local", "dev", "ci"]

# Settle delay may be raised but never lowered below this floor.
MIN_SETTLE_DELAY_MS = 1000


@dataclass(frozen=True)
class AppConfig:
    """
    Top-level configuration for a screenshot run.
    """

    environment: Environment
    log_level: str

    # Optional file path for structured JSON logs.
    log_file: Optional[str]
    # Off by default so the console report is not interleaved with JSON lines.
    log_stdout: bool

    # Page under test, resolved against the working directory.
    target_page: str
    # Where screenshot-desktop.png / screenshot-mobile.png are written.
    output_dir: str

    settle_delay_ms: int
    footer_selector: str
    footer_max_height_px: float
    # When True a "too tall" footer makes the script exit non-zero.
    footer_check_strict: bool

    headless: bool
    # Optional Chromium executable override (CHROME).
    chrome_executable: Optional[str]

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Construct configuration from environment variables.

        Raises ValueError on an unsupported APP_ENV or a malformed number.
        """

        environment = os.getenv("APP_ENV", "local")

        if environment not in {"local", "dev", "ci"}:
            raise ValueError(f"Unsupported APP_ENV value: {environment!r}")

        def _bool_env(name: str, default: bool) -> bool:
            raw = (os.getenv(name) or str(default)).strip().lower()
            return raw in ("true", "1", "yes")

        def _int_env(name: str, default: int) -> int:
            raw = (os.getenv(name) or str(default)).strip()
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got {raw!r}") from None

        def _float_env(name: str, default: float) -> float:
            raw = (os.getenv(name) or str(default)).strip()
            try:
                return float(raw)
            except ValueError:
                raise ValueError(f"{name} must be a number, got {raw!r}") from None

        return cls(
            environment=environment,  # type: ignore[arg-type]
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
            log_stdout=_bool_env("LOG_STDOUT", False),
            target_page=os.getenv("TARGET_PAGE", "index.html"),
            output_dir=os.getenv("OUTPUT_DIR", "."),
            settle_delay_ms=max(MIN_SETTLE_DELAY_MS, _int_env("SETTLE_DELAY_MS", 1000)),
            footer_selector=os.getenv("FOOTER_SELECTOR", ".copyright-footer"),
            footer_max_height_px=_float_env("FOOTER_MAX_HEIGHT_PX", 40.0),
            footer_check_strict=_bool_env("FOOTER_CHECK_STRICT", False),
            headless=_bool_env("HEADLESS", True),
            chrome_executable=os.getenv("CHROME") or None,
        )


def get_config() -> AppConfig:
    """
    Helper to obtain the current configuration.

    The runner builds one instance at startup and passes it explicitly;
    this is the fallback for callers that do not.
    """

    return AppConfig.from_env()
