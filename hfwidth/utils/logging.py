"""
Logging utilities for hfwidth.

Provides structured logging with optional JSON output.
"""

import logging
import sys
from typing import Any

import structlog


def setup_logger(name: str, level: str = "WARNING", json_logs: bool = False) -> structlog.BoundLogger:
    """
    Set up structured logging.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Whether to output JSON format logs

    Returns:
        Configured structlog logger
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    # Configure standard logging; logs go to stderr so stdout stays clean for results
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    if json_logs:
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger(name)


def log_command_event(logger: structlog.BoundLogger, event_type: str, command: str, **kwargs: Any) -> None:
    """
    Log a CLI command event with structured data.

    Args:
        logger: Structured logger instance
        event_type: Type of event (command_started, command_failed, etc.)
        command: CLI command being run
        **kwargs: Additional event data
    """
    event_data = {"command": command, **kwargs}

    if event_type.endswith("_error") or event_type.endswith("_failed"):
        logger.error(event_type, **event_data)
    elif event_type.endswith("_warning"):
        logger.warning(event_type, **event_data)
    else:
        logger.debug(event_type, **event_data)
