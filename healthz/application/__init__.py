"""
Application Layer Package

This package contains the use cases, the dashboard wire models and the
serializer that turns enriched health reports into response bytes.
"""

# Re-export submodules
from healthz.application import dtos, serializers, use_cases

__all__ = ["dtos", "serializers", "use_cases"]
