"""
Use Cases Package - Application Layer

This package contains the use cases orchestrating the check engine and
the report enrichment service.
"""

from .health_use_cases import GetHealthReportUseCase, select_all_checks

__all__ = ["GetHealthReportUseCase", "select_all_checks"]
