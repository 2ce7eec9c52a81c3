"""
Health domain entities.

This module defines the value objects produced by the check engine and
consumed by the report enrichment and serialization layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    Mapping,
    Optional,
)


class HealthStatus(str, Enum):
    """Three-level health state, serialized by name."""

    UNHEALTHY = "Unhealthy"
    DEGRADED = "Degraded"
    HEALTHY = "Healthy"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @classmethod
    def worst(cls, statuses: Iterable["HealthStatus"]) -> "HealthStatus":
        """Return the most severe status, ``HEALTHY`` when there is none."""
        return max(statuses, key=lambda status: status.severity, default=cls.HEALTHY)


_SEVERITY = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}


@dataclass(frozen=True, slots=True)
class HealthReportEntry:
    """Result of a single named check."""

    status: HealthStatus
    description: str = ""
    duration: timedelta = timedelta(0)
    exception: Optional[BaseException] = None
    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    tags: FrozenSet[str] = frozenset()


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Aggregated result of every check that ran for one invocation."""

    entries: Dict[str, HealthReportEntry]
    status: HealthStatus
    total_duration: timedelta = timedelta(0)

    @classmethod
    def from_entries(
        cls,
        entries: Mapping[str, HealthReportEntry],
        total_duration: timedelta,
    ) -> "HealthReport":
        """Build a report whose status is the worst status of its entries."""
        return cls(
            entries=dict(entries),
            status=HealthStatus.worst(entry.status for entry in entries.values()),
            total_duration=total_duration,
        )


@dataclass(frozen=True, slots=True)
class HealthCheckResult:
    """Outcome returned by a check callable, before timing and tagging."""

    status: HealthStatus
    description: str = ""
    exception: Optional[BaseException] = None
    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def healthy(cls, description: str = "", **kwargs: Any) -> "HealthCheckResult":
        return cls(status=HealthStatus.HEALTHY, description=description, **kwargs)

    @classmethod
    def degraded(cls, description: str = "", **kwargs: Any) -> "HealthCheckResult":
        return cls(status=HealthStatus.DEGRADED, description=description, **kwargs)

    @classmethod
    def unhealthy(cls, description: str = "", **kwargs: Any) -> "HealthCheckResult":
        return cls(status=HealthStatus.UNHEALTHY, description=description, **kwargs)


HealthCheck = Callable[[], Awaitable[HealthCheckResult]]


@dataclass(frozen=True, slots=True)
class HealthCheckRegistration:
    """A named check, its tags and how a failure of it is reported."""

    name: str
    check: HealthCheck
    tags: FrozenSet[str] = frozenset()
    failure_status: HealthStatus = HealthStatus.UNHEALTHY
    timeout: Optional[float] = None
