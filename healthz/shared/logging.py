"""
Logging Configuration - Shared Layer

This module configures structlog on top of the standard logging module so
that both structured events and third-party library records share the
same handlers and renderer.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from healthz.shared.consts import EnumEnvironment

DEFAULT_LOG_LEVEL = "INFO"


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure structlog and the root logger.

    Called once at import time of the application module with environment
    defaults, then again through ``update_logging_from_settings`` once the
    settings are loaded.

    Args:
        level: Log level name, falls back to ``LOG_LEVEL`` then ``INFO``.
        format_string: Accepted for settings compatibility; rendering is
            delegated to structlog.
        file_path: Optional log file, falls back to ``LOG_FILE_PATH``.
        environment: Selects the JSON renderer for production.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(environment),
        foreign_pre_chain=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).debug("Logging configured with level: %s", log_level)


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the application settings.

    Args:
        settings: The ``AppSettings`` instance (or any object exposing
            ``logging`` and ``environment`` attributes).
    """
    try:
        level = settings.logging.level
        environment = settings.environment
        configure_logging(
            level=getattr(level, "value", level),
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=getattr(environment, "value", environment),
        )
    except AttributeError as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
