"""Domain service adding process identity entries to a health report."""

from __future__ import annotations

from datetime import timedelta
from typing import Dict, Optional

from healthz.domain.entities.health import HealthReport, HealthReportEntry
from healthz.domain.ports.process_introspector import IProcessIntrospector
from healthz.domain.services.module_inventory import ModuleInventory
from healthz.shared import VERSION_TAG, get_logger

logger = get_logger(__name__)

ASSEMBLY_INFO_ENTRY = "Assembly info"
ASSEMBLIES_ENTRY = "Assemblies"
UNKNOWN_IDENTITY = "NA"
MODULE_SEPARATOR = "<br>"


class ReportEnricher:
    """
    Augment a raw report with two synthetic, non-probe entries.

    ``"Assembly info"`` carries the identity of the entry module and
    ``"Assemblies"`` the ``<br>``-joined identities of every loaded module.
    Both mirror the report status, so they can never worsen it. A real
    check registered under one of these names is overwritten.
    """

    def __init__(
        self,
        introspector: IProcessIntrospector,
        inventory: Optional[ModuleInventory] = None,
    ) -> None:
        self._introspector = introspector
        self._inventory = inventory or ModuleInventory(
            introspector.loaded_module_identities
        )

    @property
    def inventory(self) -> ModuleInventory:
        return self._inventory

    def enrich(self, report: Optional[HealthReport]) -> Optional[HealthReport]:
        if report is None:
            return None

        entries: Dict[str, HealthReportEntry] = dict(report.entries)
        for name in (ASSEMBLY_INFO_ENTRY, ASSEMBLIES_ENTRY):
            if name in entries:
                logger.debug("health.enrich.entry_overwritten", entry=name)

        entries[ASSEMBLY_INFO_ENTRY] = self._version_entry(
            report, self._entry_description()
        )
        entries[ASSEMBLIES_ENTRY] = self._version_entry(
            report, self._modules_description()
        )

        return HealthReport(
            entries=entries,
            status=report.status,
            total_duration=report.total_duration,
        )

    def _entry_description(self) -> str:
        try:
            return self._introspector.entry_identity() or UNKNOWN_IDENTITY
        except Exception as exc:
            logger.warning("health.enrich.entry_identity_failed", error=str(exc))
            return UNKNOWN_IDENTITY

    def _modules_description(self) -> str:
        # A failed enumeration is not cached; the next report retries it.
        try:
            return MODULE_SEPARATOR.join(self._inventory.get())
        except Exception as exc:
            logger.warning("health.enrich.module_inventory_failed", error=str(exc))
            return UNKNOWN_IDENTITY

    @staticmethod
    def _version_entry(report: HealthReport, description: str) -> HealthReportEntry:
        return HealthReportEntry(
            status=report.status,
            description=description,
            duration=timedelta(0),
            tags=frozenset({VERSION_TAG}),
        )
