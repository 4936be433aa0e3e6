"""Version resolution domain exceptions.

These exceptions are raised by the matchers and the pattern generator when a
policy cannot be applied to a candidate list or a baseline.

Propagation:
- UnsupportedKindError and UnsupportedKindPatternError are configuration
  errors, surfaced immediately and never retried.
- NoVersionsFoundError and NoVersionFoundError are "nothing matched" results;
  a later run with a refreshed candidate list may succeed.
"""

from versionfilter.domain.exceptions import VersionFilterError


class UnsupportedKindError(VersionFilterError):
    """Raised when a filter kind is unset or not one of the supported kinds."""

    def __init__(self, kind: str = "") -> None:
        """Initialize with the offending kind.

        Args:
            kind: The raw kind value that could not be used.
        """
        super().__init__(f"unsupported version kind {kind!r}")
        self.kind = kind


class UnsupportedKindPatternError(VersionFilterError):
    """Raised when a kind and pattern combination cannot be dispatched.

    This covers an uninitialized filter reaching ``search`` and regex
    combination kinds whose capture regex is missing or has no group.
    """

    def __init__(self, kind: str = "", pattern: str = "") -> None:
        """Initialize with the kind/pattern pair.

        Args:
            kind: The filter kind.
            pattern: The pattern (or capture regex) that could not be used.
        """
        super().__init__(f"unsupported version kind {kind!r} with pattern {pattern!r}")
        self.kind = kind
        self.pattern = pattern


class NoVersionsFoundError(VersionFilterError):
    """Raised when the candidate list is empty."""

    def __init__(self, message: str = "no version found") -> None:
        super().__init__(message)


class NoValidSemVerFoundError(VersionFilterError):
    """Raised when no candidate parses as a semantic version."""

    def __init__(self, message: str = "no valid semantic version found") -> None:
        super().__init__(message)


class NoValidDateFoundError(VersionFilterError):
    """Raised when no candidate parses under the date layout."""

    def __init__(self, layout: str = "") -> None:
        """Initialize with the layout the candidates were parsed against.

        Args:
            layout: The strptime layout in use.
        """
        message = f"no valid date found for layout {layout!r}" if layout else "no valid date found"
        super().__init__(message)
        self.layout = layout


class NoVersionFoundError(VersionFilterError):
    """Raised when a search is exhausted without any candidate matching."""

    def __init__(self, message: str = "no version found") -> None:
        super().__init__(message)


class NoVersionFoundForPatternError(NoVersionFoundError):
    """Raised when no candidate matches a specific pattern or constraint."""

    def __init__(self, pattern: str = "") -> None:
        """Initialize with the pattern that matched nothing.

        Args:
            pattern: The pattern, constraint or capture regex.
        """
        super().__init__(f"no version found matching pattern {pattern!r}")
        self.pattern = pattern


class IncorrectSemVerConstraintError(VersionFilterError):
    """Raised when a string is neither a semantic version nor a valid constraint."""

    def __init__(self, constraint: str = "") -> None:
        """Initialize with the rejected constraint.

        Args:
            constraint: The constraint expression that failed to parse.
        """
        super().__init__(f"wrong semantic versioning constraint {constraint!r}")
        self.constraint = constraint


class InvalidSemVerError(VersionFilterError):
    """Raised when a baseline for a bounded semver policy is not a semantic version."""

    def __init__(self, version: str = "") -> None:
        """Initialize with the rejected version.

        Args:
            version: The baseline that failed to parse.
        """
        super().__init__(f"invalid semantic version {version!r}")
        self.version = version
