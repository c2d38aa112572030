"""Structured logging helpers."""

from __future__ import annotations

import logging
from typing import Literal

import structlog

LogFormat = Literal["json", "console"]


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO, *, log_format: LogFormat = "json") -> None:
    """Route stdlib logging and structlog to stdout.

    ``json`` emits one object per event for the host's log collector;
    ``console`` is the human-readable renderer for local runs.
    """

    level = _coerce_level(level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if log_format == "console"
        else structlog.processors.JSONRenderer(ensure_ascii=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["LogFormat", "configure_logging", "logger"]
