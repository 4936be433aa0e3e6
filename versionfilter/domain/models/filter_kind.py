"""Filter kind enumeration.

The kind selects which matcher a VersionFilter dispatches to. The set is
closed; raw configuration text is narrowed through FilterKind.parse().
"""

from __future__ import annotations

from enum import Enum

from versionfilter.domain.errors.version import UnsupportedKindError


class FilterKind(str, Enum):
    """Closed set of version matching strategies."""

    LATEST = "latest"
    REGEX = "regex"
    SEMVER = "semver"
    TIME = "time"
    REGEX_SEMVER = "regex-semver"
    REGEX_TIME = "regex-time"

    @classmethod
    def parse(cls, raw: str | FilterKind) -> FilterKind:
        """Narrow a raw configuration value to a FilterKind.

        Accepts the canonical values as well as the slash spellings
        ``regex/semver`` and ``regex/time`` found in older manifests.

        Args:
            raw: Kind as written in configuration.

        Returns:
            The matching FilterKind.

        Raises:
            UnsupportedKindError: If raw is not a supported kind.
        """
        if isinstance(raw, cls):
            return raw
        normalized = str(raw).strip().lower().replace("/", "-")
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedKindError(kind=str(raw)) from None

    @property
    def uses_capture(self) -> bool:
        """True for kinds that extract a value with a capture regex first."""
        return self in (FilterKind.REGEX_SEMVER, FilterKind.REGEX_TIME)
