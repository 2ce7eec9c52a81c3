"""
Domain Layer Package

This package contains the health report entities, the ports towards the
check engine and process introspection, and the enrichment service. It
has no dependency on frameworks or infrastructure concerns.
"""

# Re-export submodules
from healthz.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
