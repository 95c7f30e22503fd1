"""
structlog setup for the bloglist backend.

Every record, whether it comes from a structlog logger or from a library
logging through the stdlib (uvicorn, SQLAlchemy), ends up on the root
logger and goes through the same chain:

* the request id bound by the logging middleware is merged in;
* control characters are escaped so a crafted title or username cannot
  forge log lines;
* bearer tokens, email addresses and credential headers are redacted.

Development renders to a coloured console with rich tracebacks; every other
environment writes one JSON object per line.

>>> from bloglist.monitoring import get_logger
>>> logger = get_logger(__name__)
>>> logger.info("Blog created", blog_id="5f0c...")
"""

from logging import INFO, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path
from re import Pattern
from re import compile as re_compile
from typing import Any

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.dev import ConsoleRenderer, RichTracebackFormatter
from structlog.processors import JSONRenderer, TimeStamper, add_log_level, format_exc_info
from structlog.stdlib import (
    BoundLogger,
    ExtraAdder,
    LoggerFactory,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from bloglist.configs.settings import settings

REDACTED = "[REDACTED]"

CREDENTIAL_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})

# JWTs before emails: a token segment can look like part of an address
PII_PATTERNS: tuple[tuple[Pattern[str], str], ...] = (
    (re_compile(r"eyJ[\w-]*\.eyJ[\w-]*\.[\w-]*"), "[REDACTED_JWT]"),
    (re_compile(r"[\w.%+-]+@[\w.-]+\.[a-zA-Z]{2,}"), "[REDACTED_EMAIL]"),
)

_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def sanitize_log_message(message: str) -> str:
    r"""
    Escape line breaks and tabs, drop NUL bytes.

    >>> sanitize_log_message("Blog\ncreated")
    'Blog\\ncreated'
    """
    return str(message).translate(_ESCAPES)


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """Replace the values of credential-bearing headers."""
    return {name: REDACTED if name.lower() in CREDENTIAL_HEADERS else value for name, value in headers.items()}


def redact_pii(message: str) -> str:
    for pattern, replacement in PII_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


# Local wall-clock time
add_timestamp = TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False)


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Processor that scrubs string values and any ``headers`` mapping."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = redact_pii(sanitize_log_message(value))
        elif key == "headers" and isinstance(value, dict):
            event_dict[key] = sanitize_headers(value)
    return event_dict


# Run on stdlib records before rendering
PRE_CHAIN: list[Processor] = [
    merge_contextvars,
    add_log_level,
    add_timestamp,
    sanitize_event_dict,
    ExtraAdder(),
]


def get_renderer(*, colors: bool = True) -> Processor:
    """Console renderer in development, JSON everywhere else."""
    if settings.ENVIRONMENT == "development":
        return ConsoleRenderer(
            colors=colors,
            pad_level=False,
            exception_formatter=RichTracebackFormatter(),
        )
    return JSONRenderer()


def _formatter(*, colors: bool) -> ProcessorFormatter:
    return ProcessorFormatter(processor=get_renderer(colors=colors), foreign_pre_chain=PRE_CHAIN)


def configure_logging() -> None:
    """Route structlog through the root logger and install the handlers."""
    # Reloads would otherwise stack duplicate handlers
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            add_timestamp,
            format_exc_info,
            sanitize_event_dict,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console = StreamHandler()
    console.setFormatter(_formatter(colors=True))
    root.addHandler(console)
    configure_file_logging()


def configure_file_logging() -> None:
    """Also write to a rotating ``LOG_FILE`` when ``LOG_TO_FILE`` is set."""
    if not settings.LOG_TO_FILE:
        return

    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)
    handler.setLevel(INFO)
    handler.setFormatter(_formatter(colors=False))
    root.addHandler(handler)


def get_logger(name: str) -> BoundLogger:
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    """Attach ``request_id`` to every record logged by the current request."""
    bind_contextvars(request_id=request_id)


def clear_context() -> None:
    clear_contextvars()
