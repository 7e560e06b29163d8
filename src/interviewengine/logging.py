"\"\"\"Logging utilities for the interview engine.\"\"\""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", *, json: bool = True) -> None:
    """Configure structlog output on stderr, JSON by default."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    # stderr keeps the interview transcript on stdout readable.
    logging.basicConfig(level=log_level, format="%(message)s", stream=sys.stderr)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
