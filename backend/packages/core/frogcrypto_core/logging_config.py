"""
Logging configuration.

Uses structlog to render stdlib log records. Modules keep logging through
``logging.getLogger`` with ``extra={...}``; the extra fields end up as
keys of the JSON object or as key=value pairs on the console.
"""

import logging
import sys

import structlog


def _processor_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_logs:
        timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
        renderer = structlog.processors.JSONRenderer()
        exc_processors = [structlog.processors.format_exc_info]
    else:
        timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False)
        renderer = structlog.dev.ConsoleRenderer()
        exc_processors = []

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.ExtraAdder(),
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            timestamper,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *exc_processors,
            renderer,
        ],
    )


def init_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure root logging for the process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        json_logs: Emit JSON lines instead of console format.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_processor_formatter(json_logs))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    # Keep SQL echo out of application logs unless explicitly asked for.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
