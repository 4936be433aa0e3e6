"""Pattern generator.

Turns "the current version is X and the increment policy is Y" into a new
pattern that only matches versions newer than X within policy Y. Generated
update automation uses it so that, for instance, a patch-only policy never
proposes a major bump.

Semver increment policies, for a release baseline M.m.p:

    prerelease -> ">=M.m.p-0 <=M.m.p"
    patch      -> "M.m.x"
    minor      -> "M.x"
    minoronly  -> "<baseline> || >M.m <M+1"
    major      -> ">=M"
    majoronly  -> "<baseline> || >M"

A prerelease baseline (M.m.p-pre) produces explicit ranges starting at the
baseline so that later prereleases of the same patch stay reachable.
"""

from __future__ import annotations

from versionfilter.domain.errors.version import (
    IncorrectSemVerConstraintError,
    InvalidSemVerError,
    UnsupportedKindError,
)
from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.services.latest_matcher import LATEST_PATTERN
from versionfilter.domain.services.semver_matcher import is_constraint, parse_semver

PRERELEASE = "prerelease"
PATCH = "patch"
MINOR = "minor"
MINOR_ONLY = "minoronly"
MAJOR = "major"
MAJOR_ONLY = "majoronly"

INCREMENT_POLICIES: tuple[str, ...] = (PRERELEASE, PATCH, MINOR, MINOR_ONLY, MAJOR, MAJOR_ONLY)


def greater_than_pattern(kind: FilterKind | None, pattern: str, baseline: str) -> str:
    """Return a pattern matching anything newer than baseline under the policy.

    Args:
        kind: Filter kind.
        pattern: Filter pattern (an increment policy name for semver).
        baseline: Currently known version.

    Returns:
        The generated pattern.

    Raises:
        UnsupportedKindError: If kind has no bounded-increment rule.
        InvalidSemVerError: If an increment policy gets a non-semver baseline.
        IncorrectSemVerConstraintError: If a "*" policy gets a baseline that
            is neither a version nor a constraint.
    """
    if kind is FilterKind.LATEST:
        return LATEST_PATTERN
    if kind is FilterKind.REGEX:
        return pattern
    if kind is FilterKind.SEMVER:
        return _semver_greater_than(pattern, baseline)

    raise UnsupportedKindError(kind=kind.value if kind else "")


def _semver_greater_than(policy: str, baseline: str) -> str:
    if policy in ("", "*"):
        try:
            return ">=" + str(parse_semver(baseline))
        except InvalidSemVerError:
            pass
        if not is_constraint(baseline):
            raise IncorrectSemVerConstraintError(constraint=baseline)
        return baseline

    if policy not in INCREMENT_POLICIES:
        # Already a constraint expression
        return policy

    version = parse_semver(baseline)
    major, minor, patch = version.major, version.minor, version.patch

    if not version.prerelease:
        if policy == PRERELEASE:
            return f">={major}.{minor}.{patch}-0 <={major}.{minor}.{patch}"
        if policy == PATCH:
            return f"{major}.{minor}.x"
        if policy == MINOR:
            return f"{major}.x"
        if policy == MINOR_ONLY:
            return f"{baseline} || >{major}.{minor} <{major + 1}"
        if policy == MAJOR:
            return f">={major}"
        return f"{baseline} || >{major}"

    current = str(version)
    if policy == PRERELEASE:
        return f">={current} <={major}.{minor}.{patch}"
    if policy == PATCH:
        return f">={current} <{major}.{minor + 1}.0"
    if policy == MINOR:
        return f">={current} <{major + 1}.0.0"
    if policy == MINOR_ONLY:
        return f"{current} || >{current} <{major + 1}"
    if policy == MAJOR:
        return f">={current}"
    return f"{current} || >{current}"
