"""Pydantic models for raw version filter configuration and results."""

from versionfilter.api.models.version_filter import (
    GeneratedFilterResponse,
    VersionFilterSpec,
    VersionResponse,
)

__all__ = ["GeneratedFilterResponse", "VersionFilterSpec", "VersionResponse"]
