"""
Domain Entities Package

This package contains the core domain entities for health reporting.
"""

from .errors import DomainError, HealthCheckRegistrationError, ReportSerializationError
from .health import (
    HealthCheck,
    HealthCheckRegistration,
    HealthCheckResult,
    HealthReport,
    HealthReportEntry,
    HealthStatus,
)

__all__ = [
    "HealthCheck",
    "HealthCheckRegistration",
    "HealthCheckResult",
    "HealthReport",
    "HealthReportEntry",
    "HealthStatus",
    "DomainError",
    "HealthCheckRegistrationError",
    "ReportSerializationError",
]
