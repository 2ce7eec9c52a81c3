"""
Legacy duration codec for the health dashboard wire format.

Dashboard clients older than 3.0 cannot parse structured durations, so
durations are written as constant-format time span strings
``[-][d.]hh:mm:ss[.fffffff]``. Reading never parses: any wire value
degrades to a zero duration. Only the fields annotated with
``LegacyDuration`` use this codec.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

TICKS_PER_MICROSECOND = 10
TICKS_PER_SECOND = 10_000_000
TICKS_PER_MINUTE = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY = 24 * TICKS_PER_HOUR


class LegacyTimeSpanCodec:
    """String codec for durations, write-only in practice."""

    @staticmethod
    def encode(value: timedelta) -> str:
        ticks = (
            (value.days * 86_400 + value.seconds) * TICKS_PER_SECOND
            + value.microseconds * TICKS_PER_MICROSECOND
        )
        sign = "-" if ticks < 0 else ""
        days, remainder = divmod(abs(ticks), TICKS_PER_DAY)
        hours, remainder = divmod(remainder, TICKS_PER_HOUR)
        minutes, remainder = divmod(remainder, TICKS_PER_MINUTE)
        seconds, fraction = divmod(remainder, TICKS_PER_SECOND)

        text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        if days:
            text = f"{days}.{text}"
        if fraction:
            text = f"{text}.{fraction:07d}"
        return f"{sign}{text}"

    @staticmethod
    def decode(value: Any) -> timedelta:
        # In-process values pass through; wire values are never parsed.
        if isinstance(value, timedelta):
            return value
        return timedelta(0)


LegacyDuration = Annotated[
    timedelta,
    PlainValidator(LegacyTimeSpanCodec.decode),
    PlainSerializer(LegacyTimeSpanCodec.encode, return_type=str, when_used="json"),
]
