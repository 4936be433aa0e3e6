"""
Domain layer - Pure version resolution logic.

This layer contains:
- Value objects (VersionFilter, Version, FilterKind)
- Matchers and the pattern generator (domain services)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, api
or config. Besides the stdlib it only relies on semantic_version for semver
parsing and structlog for logging.
"""

from versionfilter.domain.exceptions import VersionFilterError
from versionfilter.domain.models import FilterKind, Version, VersionFilter

__all__: list[str] = [
    "FilterKind",
    "Version",
    "VersionFilter",
    "VersionFilterError",
]
