"""
Serializer for the health dashboard (UI) report format.

Specialised version of the HealthChecks UI response writer: property
names are camel-cased, statuses are written by name and durations go
through the legacy string codec. An absent report is written as ``{}``.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, List, Optional, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError, from_json

from healthz.application.dtos.health_dto import UIHealthReportDTO
from healthz.domain.entities.errors import ReportSerializationError
from healthz.domain.entities.health import HealthReport
from healthz.shared import HEALTH_CONTENT_TYPE, get_logger

logger = get_logger(__name__)

EMPTY_RESPONSE = b"{}"


@dataclass(frozen=True)
class SerializerOptions:
    """JSON options shared by the write and read paths."""

    camel_case: bool = True
    allow_trailing_commas: bool = True
    content_type: str = HEALTH_CONTENT_TYPE


class UIReportSerializer:
    """Turn an enriched ``HealthReport`` into dashboard JSON bytes."""

    def __init__(self, options: Optional[SerializerOptions] = None) -> None:
        self._options = options or SerializerOptions()

    @property
    def options(self) -> SerializerOptions:
        return self._options

    @property
    def content_type(self) -> str:
        return self._options.content_type

    def render(self, report: Optional[HealthReport]) -> bytes:
        """
        Encode the report to JSON bytes.

        Raises:
            ReportSerializationError: If the wire model cannot be built or
                encoded.
        """
        if report is None:
            return EMPTY_RESPONSE

        try:
            ui_report = UIHealthReportDTO.from_domain(report)
            payload = ui_report.model_dump_json(by_alias=self._options.camel_case)
        except (ValidationError, PydanticSerializationError) as exc:
            logger.error("health.report.encode_failed", error=str(exc))
            raise ReportSerializationError(
                "Unable to encode health report", details={"error": str(exc)}
            ) from exc

        return payload.encode("utf-8")

    def write(self, report: Optional[HealthReport], stream: BinaryIO) -> None:
        """Write the encoded report into ``stream`` (e.g. a response body)."""
        stream.write(self.render(report))

    def serialize(self, report: Optional[HealthReport]) -> io.BytesIO:
        """Return the encoded report as a rewound in-memory stream."""
        buffer = io.BytesIO()
        self.write(report, buffer)
        buffer.seek(0)
        return buffer

    def deserialize(
        self, payload: Union[bytes, str]
    ) -> Optional[UIHealthReportDTO]:
        """
        Read a dashboard payload back into the wire model.

        ``{}`` reads as no report. Durations always read as zero.

        Raises:
            ReportSerializationError: If the payload is not a valid report.
        """
        text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
        if self._options.allow_trailing_commas:
            text = _strip_trailing_commas(text)

        try:
            document = from_json(text)
            if document == {}:
                return None
            return UIHealthReportDTO.model_validate(document)
        except ValueError as exc:
            raise ReportSerializationError(
                "Unable to decode health report", details={"error": str(exc)}
            ) from exc


def _strip_trailing_commas(text: str) -> str:
    # Drop a comma that follows a value and precedes only whitespace and a
    # closing bracket. Lone commas such as "[,]" are left for the parser.
    result: List[str] = []
    comma_at: Optional[int] = None
    previous = ""
    in_string = escaped = False

    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
                previous = char
        elif char == '"':
            in_string = True
            comma_at = None
        elif char == ",":
            comma_at = None if previous in ("", "[", "{", ",") else len(result)
            previous = char
        elif char in "]}":
            if comma_at is not None:
                result[comma_at] = ""
            comma_at = None
            previous = char
        elif not char.isspace():
            comma_at = None
            previous = char
        result.append(char)

    return "".join(result)
