"""
Health UI report service.

Exposes the aggregated health report of the running process in the JSON
shape expected by the health dashboard, enriched with process identity.

Layer Structure:
- Domain: Health report entities, ports and the enrichment service
- Application: Use cases, wire DTOs and the dashboard serializer
- Infrastructure: Check engine and interpreter introspection
- Presentation: FastAPI routes
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
