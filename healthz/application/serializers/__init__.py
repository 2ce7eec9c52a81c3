"""Serializers package - Application Layer."""

from .ui_report_serializer import EMPTY_RESPONSE, SerializerOptions, UIReportSerializer

__all__ = ["EMPTY_RESPONSE", "SerializerOptions", "UIReportSerializer"]
