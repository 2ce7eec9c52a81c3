"""DTOs for the health dashboard (UI) report payload."""

from __future__ import annotations

from datetime import timedelta
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from healthz.application.dtos.legacy_timespan import LegacyDuration
from healthz.domain.entities.health import (
    HealthReport,
    HealthReportEntry,
    HealthStatus,
)

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
)


class UIHealthReportEntryDTO(BaseModel):
    """One named entry of the dashboard payload."""

    model_config = ConfigDict(
        **_WIRE_CONFIG,
        json_schema_extra={
            "example": {
                "name": "db",
                "status": "Healthy",
                "description": "ok",
                "duration": "00:00:00.0050000",
                "tags": [],
            }
        },
    )

    name: str = Field(description="Check name")
    status: HealthStatus = Field(description="Check status")
    description: str = Field(default="", description="Human readable status note")
    duration: LegacyDuration = Field(
        default=timedelta(0), description="Check duration, legacy string encoded"
    )
    tags: List[str] = Field(default_factory=list, description="Check tags")

    @classmethod
    def from_domain(
        cls, name: str, entry: HealthReportEntry
    ) -> "UIHealthReportEntryDTO":
        return cls(
            name=name,
            status=entry.status,
            description=entry.description or "",
            duration=entry.duration,
            tags=sorted(entry.tags),
        )


class UIHealthReportDTO(BaseModel):
    """DTO representing the /healthz response payload."""

    model_config = ConfigDict(
        **_WIRE_CONFIG,
        json_schema_extra={
            "example": {
                "status": "Healthy",
                "totalDuration": "00:00:00.0050000",
                "entries": [
                    {
                        "name": "db",
                        "status": "Healthy",
                        "description": "ok",
                        "duration": "00:00:00.0050000",
                        "tags": [],
                    }
                ],
            }
        },
    )

    status: HealthStatus = Field(description="Overall status")
    total_duration: LegacyDuration = Field(
        default=timedelta(0), description="Total duration, legacy string encoded"
    )
    entries: List[UIHealthReportEntryDTO] = Field(
        default_factory=list, description="Report entries in check order"
    )

    @classmethod
    def from_domain(cls, report: HealthReport) -> "UIHealthReportDTO":
        return cls(
            status=report.status,
            total_duration=report.total_duration,
            entries=[
                UIHealthReportEntryDTO.from_domain(name, entry)
                for name, entry in report.entries.items()
            ],
        )
