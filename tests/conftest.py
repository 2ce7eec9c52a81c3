from __future__ import annotations

import sys
from datetime import timedelta
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from healthz.domain.entities.health import (
    HealthReport,
    HealthReportEntry,
    HealthStatus,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class StubIntrospector:
    """In-memory introspector counting how often modules are listed."""

    def __init__(
        self,
        entry: Optional[str] = "orders-api, Version=2.1.0",
        modules: Sequence[Optional[str]] = (
            "fastapi, Version=0.110.0",
            "pydantic, Version=2.6.4",
        ),
    ) -> None:
        self.entry = entry
        self.modules: List[Optional[str]] = list(modules)
        self.entry_calls = 0
        self.list_calls = 0

    def entry_identity(self) -> Optional[str]:
        self.entry_calls += 1
        return self.entry

    def loaded_module_identities(self) -> List[Optional[str]]:
        self.list_calls += 1
        return list(self.modules)


@pytest.fixture()
def stub_introspector() -> StubIntrospector:
    return StubIntrospector()


@pytest.fixture()
def db_entry() -> HealthReportEntry:
    return HealthReportEntry(
        status=HealthStatus.HEALTHY,
        description="ok",
        duration=timedelta(milliseconds=5),
    )


@pytest.fixture()
def sample_report(db_entry: HealthReportEntry) -> HealthReport:
    return HealthReport(
        entries={"db": db_entry},
        status=HealthStatus.HEALTHY,
        total_duration=timedelta(milliseconds=5),
    )
