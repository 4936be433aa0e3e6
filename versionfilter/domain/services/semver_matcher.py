"""Semantic version matcher.

Candidates are parsed with one of two grammars:

- loose (default): optional "v" prefix, one to three numeric components,
  optional prerelease and build metadata. Missing components are filled
  with zero, so "v2.1" becomes 2.1.0.
- strict: exactly MAJOR.MINOR.PATCH with optional prerelease and build,
  no prefix, no leading zeros.

Constraints use the npm range grammar provided by semantic_version.NpmSpec
("~2", "^1.2", "1.2.x", ">=1.0.0 <2.0.0", "1.2.3 || >1.3", "1.0 - 2.0", ...).
The Go-style spellings found in existing manifests are accepted as well:

    ">= 1.0, < 2.0"   commas and a space after an operator
    "~>1.2"           same as "~1.2"
    ">=v1.0.0"        "v" prefix inside a range
    "!=1.3.0"         exclusion, applied to the alternative it appears in
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

import structlog
from semantic_version import NpmSpec
from semantic_version import Version as SemVer

from versionfilter.domain.errors.version import (
    IncorrectSemVerConstraintError,
    InvalidSemVerError,
    NoValidSemVerFoundError,
    NoVersionFoundForPatternError,
    NoVersionsFoundError,
)
from versionfilter.domain.models.version import Version

logger = structlog.get_logger()

_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

_LOOSE_SEMVER = re.compile(
    r"^v?(?P<major>\d+)(?:\.(?P<minor>\d+))?(?:\.(?P<patch>\d+))?"
    rf"(?:-(?P<prerelease>{_IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{_IDENTIFIERS}))?$"
)

_OPERATOR_SPACE = re.compile(r"(!=|<=|>=|<|>|=|~|\^)\s+")
_V_PREFIX = re.compile(r"(?<![0-9A-Za-z.+-])v(?=\d)")
_EXCLUSION = re.compile(r"!=(\S+)")


def parse_semver(value: str, strict: bool = False) -> SemVer:
    """Parse a version string.

    Args:
        value: Version string, e.g. "1.2.3", "v1.2" or "2".
        strict: Only accept complete MAJOR.MINOR.PATCH versions.

    Returns:
        The parsed semantic version.

    Raises:
        InvalidSemVerError: If value does not parse under the grammar.
    """
    if strict:
        try:
            return SemVer(value)
        except ValueError:
            raise InvalidSemVerError(version=value) from None

    found = _LOOSE_SEMVER.match(value.strip())
    if found is None:
        raise InvalidSemVerError(version=value)

    prerelease = found.group("prerelease")
    build = found.group("build")
    try:
        return SemVer(
            major=int(found.group("major")),
            minor=int(found.group("minor") or 0),
            patch=int(found.group("patch") or 0),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )
    except ValueError:
        # e.g. numeric prerelease identifiers with leading zeros
        raise InvalidSemVerError(version=value) from None


@dataclass(frozen=True, eq=False)
class Constraint:
    """A parsed range constraint.

    Attributes:
        expression: The constraint as configured.
        alternatives: One (allowed range, excluded ranges) pair per "||"
            alternative. A version matches an alternative when it is inside
            the allowed range and outside every excluded one.
    """

    expression: str
    alternatives: tuple[tuple[NpmSpec, tuple[NpmSpec, ...]], ...]

    def match(self, version: SemVer) -> bool:
        for allowed, excluded in self.alternatives:
            if allowed.match(version) and not any(spec.match(version) for spec in excluded):
                return True
        return False


def parse_constraint(constraint: str) -> Constraint:
    """Parse a range constraint.

    Args:
        constraint: Constraint expression.

    Returns:
        The parsed constraint.

    Raises:
        IncorrectSemVerConstraintError: If the expression is not a valid range.
    """
    normalized = constraint.replace(",", " ").replace("~>", "~")
    normalized = _OPERATOR_SPACE.sub(r"\1", normalized)
    normalized = _V_PREFIX.sub("", normalized)

    alternatives: list[tuple[NpmSpec, tuple[NpmSpec, ...]]] = []
    try:
        for group in normalized.split("||"):
            excluded = tuple(NpmSpec("=" + target) for target in _EXCLUSION.findall(group))
            # An alternative made only of exclusions allows everything else
            allowed = " ".join(_EXCLUSION.sub(" ", group).split()) or "*"
            alternatives.append((NpmSpec(allowed), excluded))
    except ValueError:
        raise IncorrectSemVerConstraintError(constraint=constraint) from None

    return Constraint(expression=constraint, alternatives=tuple(alternatives))


def is_constraint(value: str) -> bool:
    """Return True if value parses as a range constraint."""
    try:
        parse_constraint(value)
    except IncorrectSemVerConstraintError:
        return False
    return True


def sort_semver(candidates: Sequence[str], strict: bool = False) -> list[tuple[SemVer, str]]:
    """Parse candidates and sort them newest first.

    Unparsable candidates are skipped. Among candidates that parse to the
    same version the most recent one (latest in the input) comes first.

    Args:
        candidates: Version strings ordered oldest first.
        strict: Use the strict grammar.

    Returns:
        (parsed version, original candidate) pairs, highest version first.
    """
    parsed: list[tuple[SemVer, str]] = []
    for candidate in reversed(candidates):
        try:
            parsed.append((parse_semver(candidate, strict=strict), candidate))
        except InvalidSemVerError:
            logger.debug("semver_candidate_skipped", candidate=candidate, strict=strict)

    parsed.sort(key=lambda item: item[0], reverse=True)
    return parsed


def search_semver(candidates: Sequence[str], constraint: str, strict: bool = False) -> Version:
    """Return the highest candidate satisfying constraint.

    Args:
        candidates: Version strings ordered oldest first.
        constraint: Range constraint; empty means "highest version".
        strict: Use the strict grammar.

    Returns:
        Version whose parsed value is the normalized semantic version and
        whose original value is the candidate it came from.

    Raises:
        NoVersionsFoundError: If candidates is empty.
        NoValidSemVerFoundError: If no candidate parses.
        IncorrectSemVerConstraintError: If constraint does not parse.
        NoVersionFoundForPatternError: If no version satisfies constraint.
    """
    if not candidates:
        raise NoVersionsFoundError()

    ranked = sort_semver(candidates, strict=strict)
    if not ranked:
        raise NoValidSemVerFoundError()

    if not constraint:
        version, original = ranked[0]
        return Version(parsed=str(version), original=original)

    spec = parse_constraint(constraint)
    for version, original in ranked:
        if spec.match(version):
            return Version(parsed=str(version), original=original)

    raise NoVersionFoundForPatternError(pattern=constraint)
