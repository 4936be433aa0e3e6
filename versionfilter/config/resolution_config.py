"""Version resolution configuration.

This module defines the runtime settings of the resolution engine with
environment variable overrides.

Environment Variables:
- VERSION_FILTER_TIME_LAYOUT: Default strptime layout for time kinds
  (default: %Y-%m-%d)
- VERSION_FILTER_ENVIRONMENT: "production" for JSON logs, anything else
  for console logs (default: production)
- LOG_LEVEL: Minimum level of emitted log events (default: INFO)

Usage:
    from versionfilter.bootstrap import get_resolution_service

    service = get_resolution_service()  # reads the environment once
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from versionfilter.domain.services.time_matcher import DEFAULT_TIME_LAYOUT

PRODUCTION = "production"
DEVELOPMENT = "development"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        The stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class ResolutionConfig:
    """Configuration for version resolution.

    Attributes:
        default_time_layout: strptime layout applied by VersionFilter.init()
            to time and regex-time filters configured without a pattern.
        environment: Logging environment, selects the structlog renderer.
        log_level: Minimum level of emitted events, one of LOG_LEVELS.
            Lowercase input is accepted and stored uppercase.
    """

    default_time_layout: str = DEFAULT_TIME_LAYOUT
    environment: str = PRODUCTION
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if "%" not in self.default_time_layout:
            raise ValueError(
                f"default_time_layout must contain strptime directives, "
                f"got {self.default_time_layout!r}"
            )
        if not self.environment:
            raise ValueError("environment must not be empty")

        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    @property
    def log_level_number(self) -> int:
        """The stdlib logging level matching log_level."""
        return int(getattr(logging, self.log_level))

    @classmethod
    def from_environment(cls) -> "ResolutionConfig":
        """Create config from environment variables with defaults.

        Environment Variables:
            VERSION_FILTER_TIME_LAYOUT: Default time layout (default: %Y-%m-%d)
            VERSION_FILTER_ENVIRONMENT: Logging environment (default: production)
            LOG_LEVEL: Minimum log level (default: INFO)

        Returns:
            ResolutionConfig with values from environment or defaults.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        return cls(
            default_time_layout=_get_str_env("VERSION_FILTER_TIME_LAYOUT", DEFAULT_TIME_LAYOUT),
            environment=_get_str_env("VERSION_FILTER_ENVIRONMENT", PRODUCTION),
            log_level=_get_str_env("LOG_LEVEL", "INFO"),
        )


# Pre-defined configurations for common use cases

# Default production config
DEFAULT_RESOLUTION_CONFIG = ResolutionConfig()

# Testing config with console logging and debug events
TEST_RESOLUTION_CONFIG = ResolutionConfig(environment=DEVELOPMENT, log_level="DEBUG")
