"""Infrastructure services package."""

from .health_check_service import (
    HealthChecksBuilder,
    HealthCheckService,
    UrlHealthCheck,
    build_health_check_service,
)
from .process_introspector import ProcessIntrospector

__all__ = [
    "HealthCheckService",
    "HealthChecksBuilder",
    "ProcessIntrospector",
    "UrlHealthCheck",
    "build_health_check_service",
]
