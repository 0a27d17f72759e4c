"""structlog configuration for the ``instantiator`` logger tree.

The factory modules log through stdlib ``logging.getLogger(__name__)``;
this module routes those records through structlog's formatter.

Two output modes:
- Human (default): console renderer on stderr, colored on a TTY
- JSON (log_json=True): structured JSON lines on stderr

Only the ``instantiator`` logger is touched. The root logger and any
host-application handlers are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from instantiator.config.settings import InstantiatorSettings

LOGGER_NAME = "instantiator"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Configure structlog processors and attach one handler to ``instantiator``.

    Repeated calls replace the previous handler instead of stacking.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Output stream; defaults to ``sys.stderr`` at call time.
    """
    out = stream if stream is not None else sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)

    pkg_logger = logging.getLogger(LOGGER_NAME)
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False
    return pkg_logger


def configure_from_settings(
    settings: InstantiatorSettings, *, stream: IO[str] | None = None
) -> logging.Logger:
    """Apply the ``verbose`` / ``log_json`` flags from *settings*."""
    return configure_logging(verbose=settings.verbose, log_json=settings.log_json, stream=stream)
