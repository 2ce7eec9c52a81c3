"""
DTOs Package - Application Layer

This package contains the wire models exchanged between the application
layer and the presentation layer, and the legacy duration codec they use.
"""

from .health_dto import UIHealthReportDTO, UIHealthReportEntryDTO
from .legacy_timespan import LegacyDuration, LegacyTimeSpanCodec

__all__ = [
    "LegacyDuration",
    "LegacyTimeSpanCodec",
    "UIHealthReportDTO",
    "UIHealthReportEntryDTO",
]
