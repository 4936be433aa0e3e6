"""Structured logging configuration with structlog.

The engine always logs through structlog. How those events are rendered is
decided once by the embedding program, from its ResolutionConfig:

    environment  "production" -> one JSON object per line
                 anything else -> colored console output
    log_level    minimum level kept; debug events such as
                 semver_candidate_skipped are dropped at INFO

Log Entry Format (production):
    {
        "event": "version_resolved",
        "level": "info",
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "correlation_id": "uuid",
        "service": "VersionResolutionService",
        "operation": "resolve",
        "kind": "semver",
        "pattern": "~2",
        ...additional context
    }
"""

from typing import cast

import structlog
from structlog.typing import Processor

from versionfilter.config.resolution_config import DEFAULT_RESOLUTION_CONFIG, ResolutionConfig
from versionfilter.infrastructure.observability.correlation import correlation_id_processor


def build_processors(config: ResolutionConfig) -> list[Processor]:
    """Return the processor chain for config, renderer last.

    Args:
        config: Resolution settings; only environment is used.

    Returns:
        The structlog processors in application order.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def configure_structlog(config: ResolutionConfig = DEFAULT_RESOLUTION_CONFIG) -> None:
    """Configure structlog for the process from config.

    Should be called once at startup by the program embedding the engine,
    usually through versionfilter.bootstrap. Without it structlog's defaults
    apply and the engine still logs.

    Args:
        config: Resolution settings providing environment and log_level.
    """
    structlog.configure(
        processors=build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(config.log_level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # module-level loggers must follow a later reconfiguration
        cache_logger_on_first_use=False,
    )
