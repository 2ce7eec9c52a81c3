"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ReportSerializationError(DomainError):
    """Raised when a health report cannot be encoded to (or decoded from) JSON."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class HealthCheckRegistrationError(DomainError):
    """Raised when a health check registration is invalid."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        message = f"Health check '{name}' is already registered"
        super().__init__(message, details)
