"""Domain ports package."""

from .health_check import CheckPredicate, IHealthCheckService
from .process_introspector import IProcessIntrospector

__all__ = ["CheckPredicate", "IHealthCheckService", "IProcessIntrospector"]
