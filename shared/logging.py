"""
Structured logging setup for the layout screenshot check.

All runtime logging goes through structlog. The console report printed by
`layout_check.report` is separate from these logs: logs are JSON lines meant
for files and CI collectors, the report is for humans.

Key principles:
- Logs are structured (JSON) and include contextual fields.
- Context can be bound per viewport pass (viewport, target).
- Configuration happens once, in one place.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

import structlog


def _build_shared_processors() -> list[structlog.types.Processor]:
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        timestamper,
        structlog.processors.EventRenamer("message"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(
    level: int | str = logging.INFO,
    log_file: Optional[str] = None,
    log_stdout: bool = False,
) -> None:
    """
    Configure structlog and the standard logging module.

    - When log_stdout is True, a StreamHandler(sys.stdout) is added.
    - When log_file is set, a FileHandler is added (parent dir created if needed).
    - When neither is requested, logs go to stderr at WARNING and above so
      failures stay visible without cluttering the console report.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if log_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(level)
        stdout_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(stdout_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(file_handler)

    if not root.handlers:
        fallback = logging.StreamHandler(sys.stderr)
        fallback.setLevel(max(level, logging.WARNING))
        fallback.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(fallback)

    structlog.configure(
        processors=_build_shared_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Obtain a structured logger.

    Usage:
        from shared.logging import get_logger, bind_run_context

        logger = get_logger(__name__)
        bind_run_context(viewport="mobile", target="file:///.../index.html")
        logger.info("screenshot_saved")
    """

    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_run_context(
    *,
    viewport: Optional[str] = None,
    target: Optional[str] = None,
    **extra: Any,
) -> Mapping[str, Any]:
    """
    Bind common context fields for a viewport pass.

    None values are dropped to keep logs concise.
    """

    context: dict[str, Any] = {
        "viewport": viewport,
        "target": target,
        **extra,
    }

    filtered_context = {k: v for k, v in context.items() if v is not None}

    structlog.contextvars.bind_contextvars(**filtered_context)
    return filtered_context
