"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from dependency_injector import containers, providers

from healthz.application.serializers.ui_report_serializer import UIReportSerializer
from healthz.application.use_cases.health_use_cases import GetHealthReportUseCase
from healthz.domain.services.module_inventory import ModuleInventory
from healthz.domain.services.report_enricher import ReportEnricher
from healthz.infrastructure.services.health_check_service import (
    build_health_check_service,
)
from healthz.infrastructure.services.process_introspector import ProcessIntrospector
from healthz.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    process_introspector = providers.Singleton(
        ProcessIntrospector,
        entry_module=config.health.entry_module,
    )

    health_check_service = providers.Singleton(
        build_health_check_service,
        self_check_enabled=config.health.self_check,
        url_checks=config.health.url_checks,
        url_timeout_seconds=config.health.url_timeout_seconds,
    )

    # Domain services (the inventory lives as long as the container)
    module_inventory = providers.Singleton(
        ModuleInventory,
        lister=process_introspector.provided.loaded_module_identities,
    )

    report_enricher = providers.Singleton(
        ReportEnricher,
        introspector=process_introspector,
        inventory=module_inventory,
    )

    # Application
    ui_report_serializer = providers.Singleton(UIReportSerializer)

    get_health_report_use_case = providers.Factory(
        GetHealthReportUseCase,
        health_check_service=health_check_service,
        report_enricher=report_enricher,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug("container.initialized", health_path=settings.health.path)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
