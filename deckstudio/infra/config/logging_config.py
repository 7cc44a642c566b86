"""
Structured logging for Deck Studio.

Events are dotted names (``usecase.success``, ``image.fetch.failed``) with
keyword fields. Request-scoped fields such as ``request_id`` and
``presentation_id`` are carried in contextvars and merged into every event.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import structlog

# Loggers of libraries that are chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "openai", "aiosqlite")


def _renderer(fmt: str) -> Any:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer(sort_keys=True)


def _processors(fmt: str, service: str) -> List[Any]:
    def add_service(_, __, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("service", service)
        return event_dict

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _renderer(fmt),
    ]


def setup_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> None:
    """Configure structlog and the stdlib loggers it writes through.

    Args:
        log_level: Level name such as "DEBUG". Defaults to ``LOG_LEVEL``.
        log_format: "json" or "console". Defaults to ``LOG_FORMAT``.
    """
    from deckstudio.infra.config.settings import get_settings

    settings = get_settings()
    level = logging.getLevelName((log_level or settings.log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    fmt = (log_format or settings.log_format).lower()

    logging.basicConfig(level=level, format="%(message)s")
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    # SQL echo is controlled by DATABASE_ECHO, not by the log level.
    if not settings.debug_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    structlog.configure(
        processors=_processors(fmt, settings.app_name),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**fields: Any) -> None:
    """Attach fields (request_id, presentation_id, owner_id) to later events."""
    structlog.contextvars.bind_contextvars(**fields)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
