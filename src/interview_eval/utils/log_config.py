"""Logging setup for command-line runs."""
from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Send structlog events through stdlib logging on stderr.

    Stdout stays reserved for JSON results.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, stream=sys.stderr)
    logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
