"""
Infrastructure Layer Package

This package contains implementations of the domain ports: the check
engine running registered probes and the introspection of the running
interpreter.
"""

from healthz.infrastructure import services

__all__ = ["services"]
