"""Logging setup for the command line tool.

Diagnostics go to stderr through structlog so that stdout only ever
carries the help text, the rebalance table or the ``error:`` block.
"""
from __future__ import annotations

import logging
import sys

import structlog

PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.dev.ConsoleRenderer(colors=False),
]


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog through the stdlib root logger on stderr.

    Args:
        level: Log level name. Unknown names fall back to WARNING.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )
    structlog.configure(
        processors=PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Return a structlog logger backed by ``logging.getLogger(name)``.

    The logger carries its own processors, so using it leaves the global
    structlog configuration alone and never writes to stdout.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
