"""Structured logging configuration using structlog over stdlib logging."""

import logging
import os

import structlog

# Third-party loggers kept at WARNING unless the tracker itself runs at DEBUG
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(log_level: str = "INFO", log_format: str | None = None) -> None:
    """Configure structlog with JSON or console rendering.

    Args:
        log_level: Root level name (e.g. "INFO", "DEBUG").
        log_format: "json" or "console". Falls back to the LOG_FORMAT
            environment variable, then to "console".
    """
    log_format = (log_format or os.environ.get("LOG_FORMAT", "console")).lower()
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Records from uvicorn and other stdlib loggers go through the same renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    quiet_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
