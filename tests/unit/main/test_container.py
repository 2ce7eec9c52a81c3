from __future__ import annotations

import pytest
from dependency_injector import providers

from healthz.application.use_cases.health_use_cases import GetHealthReportUseCase
from healthz.domain.services.report_enricher import ASSEMBLIES_ENTRY
from healthz.infrastructure.services.health_check_service import SELF_CHECK_NAME
from healthz.main.config import AppSettings, HealthSettings
from healthz.main.container import get_container, init_container
from tests.conftest import StubIntrospector


def test_init_and_get_container() -> None:
    container = init_container(AppSettings())
    assert get_container() is container
    assert isinstance(container.get_health_report_use_case(), GetHealthReportUseCase)


def test_singletons_share_module_inventory() -> None:
    container = init_container(AppSettings())

    assert container.report_enricher() is container.report_enricher()
    assert container.report_enricher().inventory is container.module_inventory()


def test_health_check_service_built_from_settings() -> None:
    settings = AppSettings(
        health=HealthSettings(self_check=True, url_checks={"orders": "http://orders"})
    )
    container = init_container(settings)

    names = [r.name for r in container.health_check_service().registrations]
    assert names == [SELF_CHECK_NAME, "orders"]


@pytest.mark.asyncio
async def test_use_case_lists_modules_once_per_container() -> None:
    container = init_container(AppSettings())
    introspector = StubIntrospector()
    container.process_introspector.override(providers.Object(introspector))

    first = await container.get_health_report_use_case().execute()
    second = await container.get_health_report_use_case().execute()

    assert introspector.list_calls == 1
    assert first.entries[ASSEMBLIES_ENTRY] == second.entries[ASSEMBLIES_ENTRY]


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("healthz.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
