"""Domain errors for versionfilter.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from VersionFilterError.
"""

from versionfilter.domain.errors.version import (
    IncorrectSemVerConstraintError,
    InvalidSemVerError,
    NoValidDateFoundError,
    NoValidSemVerFoundError,
    NoVersionFoundError,
    NoVersionFoundForPatternError,
    NoVersionsFoundError,
    UnsupportedKindError,
    UnsupportedKindPatternError,
)

__all__: list[str] = [
    "IncorrectSemVerConstraintError",
    "InvalidSemVerError",
    "NoValidDateFoundError",
    "NoValidSemVerFoundError",
    "NoVersionFoundError",
    "NoVersionFoundForPatternError",
    "NoVersionsFoundError",
    "UnsupportedKindError",
    "UnsupportedKindPatternError",
]
