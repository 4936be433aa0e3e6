"""Observability infrastructure for structured logging and correlation.

This module provides cross-cutting observability concerns:
- Structured JSON or console logging with structlog, driven by
  ResolutionConfig
- Correlation IDs so every log line of one resolution can be tied back to
  the source, condition or autodiscovery run that asked for it

Usage:
    from versionfilter.infrastructure.observability import (
        configure_structlog,
        run_scope,
    )

    # At startup
    configure_structlog(ResolutionConfig.from_environment())

    # Per pipeline run
    with run_scope(run_id):
        ...
"""

from versionfilter.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    run_scope,
    set_correlation_id,
)
from versionfilter.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
)

__all__: list[str] = [
    "build_processors",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "run_scope",
    "set_correlation_id",
]
