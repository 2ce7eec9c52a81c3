"""Infrastructure implementation of the check engine and its registration API."""

from __future__ import annotations

import asyncio
from datetime import timedelta
from time import perf_counter
from typing import Dict, Iterable, Mapping, Optional, Tuple

import httpx

from healthz.domain.entities.errors import HealthCheckRegistrationError
from healthz.domain.entities.health import (
    HealthCheck,
    HealthCheckRegistration,
    HealthCheckResult,
    HealthReport,
    HealthReportEntry,
    HealthStatus,
)
from healthz.domain.ports.health_check import CheckPredicate, IHealthCheckService
from healthz.shared import get_logger

logger = get_logger(__name__)

SELF_CHECK_NAME = "self"
URL_CHECK_TIMEOUT_SECONDS = 3.0
TIMEOUT_DESCRIPTION = "A timeout occurred while running check."


def _elapsed(start: float) -> timedelta:
    return timedelta(seconds=perf_counter() - start)


class HealthCheckService(IHealthCheckService):
    """Run registered checks on demand and aggregate them into a report."""

    def __init__(
        self,
        registrations: Iterable[HealthCheckRegistration] = (),
        *,
        skip_when_empty: bool = False,
    ) -> None:
        self._registrations: Tuple[HealthCheckRegistration, ...] = tuple(registrations)
        self._skip_when_empty = skip_when_empty

        seen = set()
        for registration in self._registrations:
            if registration.name in seen:
                raise HealthCheckRegistrationError(registration.name)
            seen.add(registration.name)

    @property
    def registrations(self) -> Tuple[HealthCheckRegistration, ...]:
        return self._registrations

    async def evaluate(
        self, predicate: Optional[CheckPredicate] = None
    ) -> Optional[HealthReport]:
        """Run the selected checks concurrently and aggregate their status."""

        selected = [
            registration
            for registration in self._registrations
            if predicate is None or predicate(registration)
        ]
        if not selected and self._skip_when_empty:
            return None

        start = perf_counter()
        tasks = {
            registration.name: asyncio.create_task(self._run_check(registration))
            for registration in selected
        }

        entries: Dict[str, HealthReportEntry] = {}
        for name, task in tasks.items():
            entries[name] = await task

        report = HealthReport.from_entries(entries, _elapsed(start))
        logger.debug(
            "health.checks.evaluated",
            status=report.status.value,
            checks=len(entries),
        )
        return report

    async def _run_check(
        self, registration: HealthCheckRegistration
    ) -> HealthReportEntry:
        start = perf_counter()
        try:
            if registration.timeout is None:
                result = await registration.check()
            else:
                result = await asyncio.wait_for(
                    registration.check(), timeout=registration.timeout
                )
        except asyncio.TimeoutError as exc:
            logger.warning(
                "health.check.timeout",
                check=registration.name,
                timeout=registration.timeout,
            )
            return HealthReportEntry(
                status=registration.failure_status,
                description=TIMEOUT_DESCRIPTION,
                duration=_elapsed(start),
                exception=exc,
                tags=registration.tags,
            )
        except Exception as exc:
            logger.warning(
                "health.check.failure", check=registration.name, error=str(exc)
            )
            return HealthReportEntry(
                status=registration.failure_status,
                description=str(exc),
                duration=_elapsed(start),
                exception=exc,
                tags=registration.tags,
            )

        return HealthReportEntry(
            status=result.status,
            description=result.description,
            duration=_elapsed(start),
            exception=result.exception,
            data=result.data,
            tags=registration.tags,
        )


async def self_check() -> HealthCheckResult:
    """Baseline liveness check, healthy whenever the process can answer."""
    return HealthCheckResult.healthy()


class UrlHealthCheck:
    """HTTP GET probe, healthy on any 2xx answer."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = URL_CHECK_TIMEOUT_SECONDS,
        failure_status: HealthStatus = HealthStatus.UNHEALTHY,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.failure_status = failure_status

    async def __call__(self) -> HealthCheckResult:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.url)

        data = {"url": self.url, "status_code": response.status_code}
        if response.is_success:
            return HealthCheckResult.healthy(f"HTTP {response.status_code}", data=data)

        return HealthCheckResult(
            status=self.failure_status,
            description=(
                f"{self.url} is not responding with code in 200...299 range, "
                f"the current status is {response.status_code}."
            ),
            data=data,
        )


class HealthChecksBuilder:
    """
    Fluent registration of health checks.

    Example:
        service = (
            HealthChecksBuilder.create()
            .add_url_check("http://orders:8080/healthz", "orders")
            .build()
        )
    """

    def __init__(self) -> None:
        self._registrations: Dict[str, HealthCheckRegistration] = {}

    @classmethod
    def create(cls) -> "HealthChecksBuilder":
        """Return a builder holding the baseline ``self`` check."""
        return cls().add_self_check()

    def add_check(
        self,
        name: str,
        check: HealthCheck,
        *,
        tags: Iterable[str] = (),
        failure_status: HealthStatus = HealthStatus.UNHEALTHY,
        timeout: Optional[float] = None,
    ) -> "HealthChecksBuilder":
        if name in self._registrations:
            raise HealthCheckRegistrationError(name)

        self._registrations[name] = HealthCheckRegistration(
            name=name,
            check=check,
            tags=frozenset(tags),
            failure_status=failure_status,
            timeout=timeout,
        )
        return self

    def add_self_check(self) -> "HealthChecksBuilder":
        return self.add_check(SELF_CHECK_NAME, self_check)

    def add_url_check(
        self,
        url: str,
        tag: str,
        *,
        timeout: float = URL_CHECK_TIMEOUT_SECONDS,
    ) -> "HealthChecksBuilder":
        """Register a reachability probe named and tagged after ``tag``."""
        return self.add_check(
            tag,
            UrlHealthCheck(url, timeout=timeout),
            tags=(tag,),
            failure_status=HealthStatus.UNHEALTHY,
            timeout=timeout,
        )

    def build(self, *, skip_when_empty: bool = False) -> HealthCheckService:
        return HealthCheckService(
            self._registrations.values(), skip_when_empty=skip_when_empty
        )


def build_health_check_service(
    self_check_enabled: bool = True,
    url_checks: Optional[Mapping[str, str]] = None,
    url_timeout_seconds: float = URL_CHECK_TIMEOUT_SECONDS,
) -> HealthCheckService:
    """Composition helper turning health settings into a check engine."""

    builder = (
        HealthChecksBuilder.create() if self_check_enabled else HealthChecksBuilder()
    )
    for tag, url in (url_checks or {}).items():
        builder.add_url_check(url, tag, timeout=url_timeout_seconds)
    return builder.build()
