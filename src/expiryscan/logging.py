"""Structured logging for expiryscan.

structlog on top of the stdlib logging tree. The extraction engine only
emits DEBUG events (winning strategy, pivot expansions, empty input), so
a frame loop running at the default INFO level stays silent.

Logging is configured lazily from Settings (EXPIRYSCAN_LOG_LEVEL,
EXPIRYSCAN_LOG_FORMAT) the first time a logger is requested, unless the
application called configure_logging() first.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import Processor

_configured = False

_SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _render_chain(format: str) -> list[Processor]:
    if format.lower() == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def configure_logging(level: str = "INFO", format: str = "json") -> None:
    """Configure structlog and the root stdlib logger.

    Safe to call repeatedly; the last call wins.

    Args:
        level: Level name. Unknown names fall back to INFO.
        format: "json" for machine-readable lines, "text" for a colored console.

    Example:
        ```python
        configure_logging(level="DEBUG", format="text")
        DateExtractor().extract(["EXP 15/11/2027"])  # logs the winning strategy
        ```
    """
    global _configured

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *_render_chain(format)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def configure_from_settings() -> None:
    """Configure logging from the global Settings."""
    from expiryscan.config import settings

    configure_logging(level=settings.log_level, format=settings.log_format)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Structured logger, configuring from Settings on first use."""
    if not _configured:
        configure_from_settings()

    return structlog.get_logger(name)  # type: ignore[no-any-return]


def bind_context(**kwargs: object) -> None:
    """Attach key/value pairs to every later log line, e.g. a scan session id.

    Example:
        ```python
        bind_context(session_id="scan_01")
        ```
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop everything bound with bind_context()."""
    structlog.contextvars.clear_contextvars()


logger = get_logger("expiryscan")
