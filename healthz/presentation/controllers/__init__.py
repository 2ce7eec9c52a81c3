"""
Controllers Package - Presentation Layer

This package contains the FastAPI routes. Controllers map use case
results to HTTP responses and translate domain errors to status codes.
"""

from .system_controller import (
    DEFAULT_HEALTH_PATH,
    create_system_router,
    health_report,
    use_health,
)

__all__ = [
    "DEFAULT_HEALTH_PATH",
    "create_system_router",
    "health_report",
    "use_health",
]
