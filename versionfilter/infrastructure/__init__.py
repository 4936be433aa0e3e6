"""
Infrastructure layer - cross-cutting runtime concerns for versionfilter.

This layer contains:
- Structured logging configuration (structlog)
- Correlation id management for tracing a resolution across callers

IMPORT RULES:
- CAN import from: domain, config
- CANNOT import from: application, api
"""
