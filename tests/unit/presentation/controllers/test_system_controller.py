from __future__ import annotations

import json
from typing import Optional

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from healthz.application.serializers.ui_report_serializer import UIReportSerializer
from healthz.application.use_cases.health_use_cases import GetHealthReportUseCase
from healthz.domain.entities.health import (
    HealthReport,
    HealthReportEntry,
    HealthStatus,
)
from healthz.domain.services.report_enricher import ReportEnricher
from healthz.main.config import AppSettings
from healthz.main.container import init_container
from healthz.presentation.controllers.system_controller import (
    DEFAULT_HEALTH_PATH,
    create_system_router,
    health_report,
    use_health,
)


class _HealthService:
    def __init__(self, report: Optional[HealthReport]):
        self._report = report

    async def evaluate(self, predicate=None) -> Optional[HealthReport]:
        return self._report


def _use_case(report, introspector) -> GetHealthReportUseCase:
    return GetHealthReportUseCase(_HealthService(report), ReportEnricher(introspector))


@pytest.mark.asyncio
async def test_health_endpoint_returns_dashboard_json(
    stub_introspector, sample_report
) -> None:
    response = await health_report(
        get_health_report_use_case=_use_case(sample_report, stub_introspector),
        ui_report_serializer=UIReportSerializer(),
    )

    body = json.loads(response.body)
    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert body["status"] == "Healthy"
    assert len(body["entries"]) == 3


@pytest.mark.asyncio
async def test_health_endpoint_without_report_returns_empty_object(
    stub_introspector,
) -> None:
    response = await health_report(
        get_health_report_use_case=_use_case(None, stub_introspector),
        ui_report_serializer=UIReportSerializer(),
    )

    assert response.body == b"{}"
    assert response.media_type == "application/json"


@pytest.mark.asyncio
async def test_health_endpoint_translates_encoding_failure(stub_introspector) -> None:
    report = HealthReport(
        entries={
            "broken": HealthReportEntry(
                status=HealthStatus.HEALTHY,
                description=object(),  # type: ignore[arg-type]
            )
        },
        status=HealthStatus.HEALTHY,
    )

    with pytest.raises(HTTPException) as exc_info:
        await health_report(
            get_health_report_use_case=_use_case(report, stub_introspector),
            ui_report_serializer=UIReportSerializer(),
        )

    assert exc_info.value.status_code == 500


@pytest.fixture()
def wired_container():
    return init_container(AppSettings())


def test_create_system_router_uses_given_path(wired_container) -> None:
    app = FastAPI()
    app.include_router(create_system_router("/status/health"))

    with TestClient(app) as client:
        assert client.get("/status/health").status_code == 200
        assert client.post("/status/health").status_code == 405
        assert client.get(DEFAULT_HEALTH_PATH).status_code == 404


def test_use_health_mounts_default_path(wired_container) -> None:
    app = use_health(FastAPI())

    with TestClient(app) as client:
        response = client.get(DEFAULT_HEALTH_PATH)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
