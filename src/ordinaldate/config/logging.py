"""structlog configuration for ordinaldate.

Log records go to stderr only, so stdout stays clean for results.
Two renderings:
- Human (default): structlog console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line

Library modules log through stdlib ``logging.getLogger(__name__)``; records
under ``ordinaldate`` are rendered by the structlog formatter.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "ordinaldate"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and route all output to one handler.

    Safe to call repeatedly; the root handler is replaced, never stacked.

    Args:
        verbose: DEBUG for the ``ordinaldate`` logger. When False, WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
        stream: Destination stream, stderr by default.
    """
    out = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json, out),
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
