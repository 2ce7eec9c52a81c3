"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from healthz.domain.entities.health import HealthCheckRegistration, HealthReport

CheckPredicate = Callable[[HealthCheckRegistration], bool]


class IHealthCheckService(Protocol):
    """Interface for running the registered checks and aggregating a report."""

    async def evaluate(
        self, predicate: Optional[CheckPredicate] = None
    ) -> Optional[HealthReport]:
        """
        Run the checks selected by ``predicate`` (all when omitted).

        Returns ``None`` when the invocation was skipped.
        """
        ...
