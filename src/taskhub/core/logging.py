"""Structured logging for the API.

Log lines are structlog event dicts rendered as JSON (or colored console
output in debug). Request-scoped fields such as request_id and user_id live
in contextvars, so services log entity ids only and never thread request
state through their signatures.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Keys whose values must never reach a log sink
SENSITIVE_KEYS = frozenset(
    {"password", "confirm_password", "hashed_password", "token", "authorization"}
)
REDACTED = "[REDACTED]"


def redact_sensitive(
    logger: Any, method_name: str, event_dict: structlog.typing.EventDict
) -> structlog.typing.EventDict:
    """Replace credential-bearing fields with a placeholder."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def setup_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: Console renderer and DEBUG level when True, JSON otherwise.
        level: Explicit level name, overriding the one implied by debug.
    """
    if level:
        log_level = logging.getLevelName(level.upper())
    else:
        log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_sensitive,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # SQL echo is controlled by DATABASE_ECHO, not the root level
    for noisy in ("sqlalchemy.engine", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None, **fields: Any) -> None:
    """Attach the correlation id and any extra request fields to later log calls."""
    if request_id:
        bind_contextvars(request_id=request_id)
    if fields:
        bind_contextvars(**fields)


def bind_user_context(user_id: int, email: str | None = None) -> None:
    """Attach the authenticated user to later log calls.

    The email is only bound when LOG_USER_EMAILS is enabled.
    """
    from src.taskhub.core.config import get_settings

    bind_contextvars(user_id=user_id)
    if email and get_settings().log_user_emails:
        bind_contextvars(user_email=email)


def clear_request_context() -> None:
    clear_contextvars()
