"""Bootstrap wiring for the version resolution service."""

from __future__ import annotations

from versionfilter.application.services.version_resolution_service import (
    VersionResolutionService,
)
from versionfilter.bootstrap.logging import configure_logging
from versionfilter.config.resolution_config import ResolutionConfig

_resolution_service: VersionResolutionService | None = None


def get_resolution_service() -> VersionResolutionService:
    """Get the shared service, configuring it from the environment on first use."""
    global _resolution_service
    if _resolution_service is None:
        config = ResolutionConfig.from_environment()
        configure_logging(config)
        _resolution_service = VersionResolutionService(config)
    return _resolution_service


def set_resolution_service(service: VersionResolutionService) -> None:
    """Set a custom service (testing override)."""
    global _resolution_service
    _resolution_service = service


def reset_resolution_service() -> None:
    """Reset the service singleton."""
    global _resolution_service
    _resolution_service = None
