"""
Page readiness: navigate to the target and wait for the page to settle.

The settle wait is a fixed delay after the load event rather than an
event-driven signal; screenshots depend on animations having finished, so
the delay is never shorter than SETTLE_DELAY_MS.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Optional

from playwright.async_api import Page, Response
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from layout_check.constants import LOAD_STATE_TIMEOUT_MS, SETTLE_DELAY_MS
from shared.logging import get_logger

logger = get_logger(__name__)


async def navigate(page: Page, url: str) -> Optional[Response]:
    """
    Navigate to url. No retries: navigation errors propagate to the caller.
    """
    logger.info("navigation_started", url=url)
    return await page.goto(url)


async def settle_page(
    page: Page,
    settle_ms: int = SETTLE_DELAY_MS,
    load_timeout: int = LOAD_STATE_TIMEOUT_MS,
) -> dict:
    """
    Wait for the load state, then pause settle_ms for CSS/JS transitions.

    A timeout waiting for the load state is soft: it is logged and the
    settle delay still runs. Returns a timings dict with a fixed key set.
    """
    settle_ms = max(settle_ms, SETTLE_DELAY_MS)
    start_time = datetime.now(timezone.utc)
    timings: dict = {
        "navigation_start": start_time.isoformat(),
        "loaded": None,
        "settled": None,
        "total_settle_duration_ms": None,
        "soft_timeout": False,
    }

    try:
        await page.wait_for_load_state("load", timeout=load_timeout)
        timings["loaded"] = datetime.now(timezone.utc).isoformat()
    except PlaywrightTimeoutError:
        logger.warning("settle_soft_timeout", timeout_ms=load_timeout)
        timings["soft_timeout"] = True

    await asyncio.sleep(settle_ms / 1000)

    settled_time = datetime.now(timezone.utc)
    timings["settled"] = settled_time.isoformat()
    timings["total_settle_duration_ms"] = (settled_time - start_time).total_seconds() * 1000

    logger.info(
        "page_settled",
        settle_ms=settle_ms,
        total_settle_duration_ms=timings["total_settle_duration_ms"],
        soft_timeout=timings["soft_timeout"],
    )
    return timings
