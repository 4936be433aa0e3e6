"""Application services for versionfilter."""

from versionfilter.application.services.base import LoggingMixin
from versionfilter.application.services.version_resolution_service import (
    VersionResolutionService,
)

__all__ = ["LoggingMixin", "VersionResolutionService"]
