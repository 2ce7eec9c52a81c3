"""System endpoint exposing the health report in the dashboard format."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Response, status

from healthz.application.serializers.ui_report_serializer import UIReportSerializer
from healthz.application.use_cases.health_use_cases import (
    GetHealthReportUseCase,
    select_all_checks,
)
from healthz.domain.entities.errors import ReportSerializationError
from healthz.shared import get_logger

logger = get_logger(__name__)

DEFAULT_HEALTH_PATH = "/healthz"


@inject
async def health_report(
    get_health_report_use_case: GetHealthReportUseCase = Depends(
        Provide["get_health_report_use_case"]
    ),
    ui_report_serializer: UIReportSerializer = Depends(
        Provide["ui_report_serializer"]
    ),
) -> Response:
    """Return every registered check, plus process identity entries."""
    report = await get_health_report_use_case.execute(select_all_checks)
    try:
        body = ui_report_serializer.render(report)
    except ReportSerializationError as exc:
        logger.error("health.report.failure", error=exc.message, exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to serialize health report",
        ) from exc

    if report is not None:
        logger.debug("health.report.served", status=report.status.value)
    return Response(content=body, media_type=ui_report_serializer.content_type)


def create_system_router(path: str = DEFAULT_HEALTH_PATH) -> APIRouter:
    """Build the router serving the health report on ``path`` (no auth)."""
    router = APIRouter(tags=["System"])
    router.add_api_route(
        path,
        health_report,
        methods=["GET"],
        response_class=Response,
        name="health_report",
        summary="Aggregated health report",
    )
    return router


def use_health(app: FastAPI, path: str = DEFAULT_HEALTH_PATH) -> FastAPI:
    """Mount the health endpoint on ``app``."""
    app.include_router(create_system_router(path))
    return app
