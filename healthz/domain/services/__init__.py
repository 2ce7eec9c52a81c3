"""Domain services package."""

from .module_inventory import ModuleInventory
from .report_enricher import (
    ASSEMBLIES_ENTRY,
    ASSEMBLY_INFO_ENTRY,
    UNKNOWN_IDENTITY,
    ReportEnricher,
)

__all__ = [
    "ASSEMBLIES_ENTRY",
    "ASSEMBLY_INFO_ENTRY",
    "UNKNOWN_IDENTITY",
    "ModuleInventory",
    "ReportEnricher",
]
