"""VersionFilter policy model.

A VersionFilter holds the declarative policy a caller configured for one
resource: which matcher to use (kind), what to look for (pattern), the
capture regex for the combination kinds, and whether semver parsing is
strict. It normalizes its own defaults, validates itself, and dispatches
searches and pattern generation to the domain services.

Lifecycle:
    A filter is built once from configuration, normalized with init(), and
    then treated as an immutable value. A source-chaining caller that needs
    a different pattern for a single search uses with_pattern(), which
    returns a copy.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

import structlog

from versionfilter.domain.errors.version import (
    NoVersionsFoundError,
    UnsupportedKindError,
    UnsupportedKindPatternError,
)
from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.models.version import Version
from versionfilter.domain.services.latest_matcher import LATEST_PATTERN, search_latest
from versionfilter.domain.services.pattern_generator import greater_than_pattern
from versionfilter.domain.services.regex_matcher import (
    extract_captures,
    search_regex,
)
from versionfilter.domain.services.semver_matcher import search_semver
from versionfilter.domain.services.time_matcher import DEFAULT_TIME_LAYOUT, search_time

logger = structlog.get_logger()

DEFAULT_REGEX_PATTERN = ".*"
DEFAULT_SEMVER_PATTERN = "*"


@dataclass(frozen=True)
class VersionFilter:
    """Declarative version matching policy.

    Attributes:
        kind: Matching strategy. Raw strings are narrowed to FilterKind on
            construction; None means "not configured".
        pattern: Kind-specific pattern: exact text or "latest" for latest,
            a regular expression for regex, a range constraint for semver,
            a strptime layout for time.
        regex: Capture regex used by regex-semver and regex-time to extract
            the value that is then matched.
        strict: Reject loosely formed semantic versions (semver kinds only).

    Example:
        >>> f = VersionFilter(kind="semver", pattern="~2").init()
        >>> f.search(["1.0", "2.0", "3.0"])
        Version(parsed='2.0.0', original='2.0')
    """

    kind: FilterKind | None = None
    pattern: str = ""
    regex: str = ""
    strict: bool = False

    def __post_init__(self) -> None:
        """Narrow a raw kind string to FilterKind.

        Raises:
            UnsupportedKindError: If kind is a string outside the supported set.
        """
        if self.kind is None or isinstance(self.kind, FilterKind):
            return
        if self.kind == "":
            object.__setattr__(self, "kind", None)
            return
        object.__setattr__(self, "kind", FilterKind.parse(self.kind))

    def init(self, time_layout: str = DEFAULT_TIME_LAYOUT) -> VersionFilter:
        """Return a normalized copy with defaults applied, then validate it.

        Defaults: kind falls back to latest; an empty pattern becomes
        "latest" for latest, "*" for semver kinds, ".*" for regex and
        time_layout for time kinds. Calling init() on an already
        normalized filter returns an equal filter.

        Args:
            time_layout: Default strptime layout for time kinds.

        Returns:
            The normalized filter.

        Raises:
            UnsupportedKindPatternError: If a combination kind has no regex.
        """
        kind = self.kind or FilterKind.LATEST
        default_patterns = {
            FilterKind.LATEST: LATEST_PATTERN,
            FilterKind.REGEX: DEFAULT_REGEX_PATTERN,
            FilterKind.SEMVER: DEFAULT_SEMVER_PATTERN,
            FilterKind.REGEX_SEMVER: DEFAULT_SEMVER_PATTERN,
            FilterKind.TIME: time_layout,
            FilterKind.REGEX_TIME: time_layout,
        }

        normalized = replace(self, kind=kind, pattern=self.pattern or default_patterns[kind])
        normalized.validate()
        return normalized

    def validate(self) -> None:
        """Validate that the filter can be dispatched.

        Raises:
            UnsupportedKindError: If kind is not set.
            UnsupportedKindPatternError: If a combination kind has no regex.
        """
        if self.kind is None:
            raise UnsupportedKindError(kind="")
        if self.kind.uses_capture and not self.regex:
            raise UnsupportedKindPatternError(kind=self.kind.value, pattern=self.regex)

    def is_zero(self) -> bool:
        """Return True if nothing at all was configured.

        Callers use this to substitute an ecosystem-specific default policy
        (for instance semver with pattern "*" for chart lookups) before
        calling init().
        """
        return self == VersionFilter()

    def with_pattern(self, pattern: str) -> VersionFilter:
        """Return a copy using a different pattern (source chaining override)."""
        return replace(self, pattern=pattern)

    def search(self, candidates: Sequence[str]) -> Version:
        """Return the version matching this policy.

        Ordering contract: candidates MUST be ordered oldest first. The
        latest and regex kinds scan from the end and prefer the most recent
        match; the semver and time kinds break ties in favour of the later
        candidate.

        Args:
            candidates: Raw version strings, oldest first.

        Returns:
            The matching Version.

        Raises:
            NoVersionsFoundError: If candidates is empty.
            UnsupportedKindPatternError: If the filter has no kind.
            re.error: If a regular expression does not compile.
            VersionFilterError: Any matcher-specific failure.
        """
        logger.debug(
            "version_search_started",
            kind=self.kind.value if self.kind else "",
            pattern=self.pattern,
            candidates=len(candidates),
        )

        if not candidates:
            raise NoVersionsFoundError()

        if self.kind is FilterKind.LATEST:
            return search_latest(candidates, self.pattern)
        if self.kind is FilterKind.REGEX:
            return search_regex(candidates, self.pattern)
        if self.kind is FilterKind.SEMVER:
            return search_semver(candidates, self.pattern, strict=self.strict)
        if self.kind is FilterKind.TIME:
            return search_time(candidates, self.pattern)
        if self.kind is FilterKind.REGEX_SEMVER:
            captures = extract_captures(candidates, self.regex, kind=self.kind)
            found = search_semver(list(captures), self.pattern, strict=self.strict)
            return Version(parsed=found.parsed, original=captures[found.original])
        if self.kind is FilterKind.REGEX_TIME:
            captures = extract_captures(candidates, self.regex, kind=self.kind)
            found = search_time(list(captures), self.pattern)
            return Version(parsed=found.parsed, original=captures[found.original])

        raise UnsupportedKindPatternError(kind="", pattern=self.pattern)

    def greater_than_pattern(self, baseline: str) -> str:
        """Return a pattern matching versions newer than baseline.

        The result is meant to be embedded, together with the same kind, in
        a freshly generated filter. See
        versionfilter.domain.services.pattern_generator for the rules.

        Args:
            baseline: The currently known version.

        Returns:
            The new pattern.

        Raises:
            UnsupportedKindError: For kinds without a bounded increment rule.
            IncorrectSemVerConstraintError: If baseline is neither a version
                nor a constraint.
            InvalidSemVerError: If a bounded semver policy gets a
                non-semver baseline.
        """
        return greater_than_pattern(self.kind, self.pattern, baseline)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization into generated configuration."""
        return {
            "kind": self.kind.value if self.kind else "",
            "pattern": self.pattern,
            "regex": self.regex,
            "strict": self.strict,
        }
