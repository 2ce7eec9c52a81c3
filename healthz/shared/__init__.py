"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides utilities, constants and enums used across the
domain, application, infrastructure and presentation layers.

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import (
    HEALTH_CONTENT_TYPE,
    VERSION_TAG,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "HEALTH_CONTENT_TYPE",
    "VERSION_TAG",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
