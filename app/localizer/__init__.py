"""localizer - locale and style aware string resource resolution.

Subpackages:
- configuration: pydantic settings (missing resource policy, catalog location)
- logging: structlog setup
- resources: loaders, interpolators and the Localizer resolver
- services: application-scoped providers
"""
