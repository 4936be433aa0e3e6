"""Composition root for wiring the engine into a host program.

This package reads ResolutionConfig from the environment, configures
structured logging from it, and hands out the shared
VersionResolutionService.
"""

from versionfilter.bootstrap.logging import configure_logging
from versionfilter.bootstrap.resolution import (
    get_resolution_service,
    reset_resolution_service,
    set_resolution_service,
)

__all__ = [
    "configure_logging",
    "get_resolution_service",
    "reset_resolution_service",
    "set_resolution_service",
]
