"""Use cases for the health report endpoint."""

from typing import Optional

from healthz.domain.entities.health import HealthCheckRegistration, HealthReport
from healthz.domain.ports.health_check import CheckPredicate, IHealthCheckService
from healthz.domain.services.report_enricher import ReportEnricher
from healthz.shared import get_logger

logger = get_logger(__name__)


def select_all_checks(_registration: HealthCheckRegistration) -> bool:
    return True


class GetHealthReportUseCase:
    """Run the registered checks and enrich the resulting report."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        report_enricher: ReportEnricher,
    ) -> None:
        self._health_check_service = health_check_service
        self._report_enricher = report_enricher

    async def execute(
        self, predicate: CheckPredicate = select_all_checks
    ) -> Optional[HealthReport]:
        report = await self._health_check_service.evaluate(predicate)
        if report is None:
            logger.debug("health.report.skipped")
            return None

        enriched = self._report_enricher.enrich(report)
        logger.debug(
            "health.report.generated",
            status=report.status.value,
            entries=len(report.entries),
        )
        return enriched
