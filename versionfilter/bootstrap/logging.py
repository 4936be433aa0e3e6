"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import structlog

from versionfilter.config.resolution_config import ResolutionConfig
from versionfilter.infrastructure.observability import configure_structlog


def configure_logging(config: ResolutionConfig) -> None:
    """Configure structlog from config and record the outcome.

    Args:
        config: Resolution settings providing environment and log_level.
    """
    configure_structlog(config)
    structlog.get_logger().bind(component="bootstrap").info(
        "structured_logging_configured",
        environment=config.environment,
        log_level=config.log_level,
    )


__all__ = ["configure_logging"]
