"""Domain models for versionfilter.

Contains the value objects that describe a resolution policy and its
result. These models are immutable and contain no infrastructure
dependencies.
"""

from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.models.version import Version
from versionfilter.domain.models.version_filter import VersionFilter

__all__: list[str] = ["FilterKind", "Version", "VersionFilter"]
