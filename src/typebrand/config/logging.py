"""structlog configuration for typebrand.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (log_json): Structured JSON lines to stderr

The library never calls this on import; applications opt in. Only the
``typebrand`` logger is touched: the root logger, its handlers, and any
global structlog configuration belong to the host application.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from typebrand.config.settings import BrandSettings

LOGGER_NAME = "typebrand"

# The one handler typebrand owns; replaced on every configure call.
_handler: logging.Handler | None = None


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``typebrand.*`` records through a structlog formatter on stderr.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    global _handler

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    brand_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        brand_logger.removeHandler(_handler)
    brand_logger.addHandler(handler)
    brand_logger.propagate = False
    brand_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    _handler = handler


def configure_from_settings(settings: BrandSettings) -> None:
    """Apply the logging fields of *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
