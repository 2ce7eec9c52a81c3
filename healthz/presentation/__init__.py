"""
Presentation Layer Package

This package exposes the health report over HTTP through FastAPI
routers mounted by the composition root.
"""

from healthz.presentation import controllers

__all__ = ["controllers"]
