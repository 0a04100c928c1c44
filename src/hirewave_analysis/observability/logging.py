"""structlog setup and per-request log context."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    merge_contextvars,
    unbind_contextvars,
)

if TYPE_CHECKING:
    from hirewave_core.config.settings import Settings

NOISY_LOGGERS = ("httpx", "httpcore", "pdfminer", "google_genai", "urllib3")

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through one root handler.

    ``settings.log_format`` picks JSON lines or the console renderer;
    ``settings.log_level`` sets the root level. HTTP and PDF library
    loggers never go below WARNING.
    """
    level = _resolve_level(settings.log_level)

    structlog.configure(
        processors=[*SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.log_format),
            ],
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_request_context(request_id: str | None = None, **extra: str) -> str:
    """Bind a request id, generated when omitted, plus extra keys; return the id."""
    request_id = request_id or uuid.uuid4().hex[:12]
    bind_contextvars(request_id=request_id, **extra)
    return request_id


def clear_request_context(*keys: str) -> None:
    """Unbind the named keys, or every bound key when none are given."""
    if keys:
        unbind_contextvars(*keys)
    else:
        clear_contextvars()


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _resolve_level(level_name: str) -> int:
    """Map a level name to its logging constant, INFO when unknown."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO
