"""enigma_sim.logconfig.

Logging setup for enigma-sim.

Library modules log through module-level structlog loggers
(``structlog.get_logger(__name__)``) and never configure logging themselves.
The command-line entry point calls :func:`configure_logging` once. Diagnostics
go to stderr so ciphertext on stdout stays clean for piping.

"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "WARNING", format_json: bool = False) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_json: Render JSON lines instead of the colored console format.

    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(level=log_level, stream=sys.stderr, format="%(message)s")
    logging.getLogger("enigma_sim").setLevel(log_level)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
