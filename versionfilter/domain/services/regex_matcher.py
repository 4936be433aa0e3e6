"""Regular expression matchers.

search_regex() returns the most recent candidate the pattern matches.
extract_captures() is the first step of the regex-semver and regex-time
kinds: it pulls a sub-value out of every candidate so the semver or time
matcher can rank it, while remembering which raw candidate it came from.

Capture convention:
    The named group "version" is used when the regex defines one,
    otherwise the first capture group. Matching uses re.search, so the
    regex may match anywhere in the candidate unless it is anchored.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

import structlog

from versionfilter.domain.errors.version import (
    NoVersionFoundForPatternError,
    NoVersionsFoundError,
    UnsupportedKindPatternError,
)
from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.models.version import Version

logger = structlog.get_logger()

CAPTURE_GROUP_NAME = "version"


def search_regex(candidates: Sequence[str], pattern: str) -> Version:
    """Return the most recent candidate matching pattern.

    Args:
        candidates: Version strings ordered oldest first.
        pattern: Regular expression.

    Returns:
        The matching candidate, verbatim.

    Raises:
        re.error: If pattern does not compile.
        NoVersionsFoundError: If candidates is empty.
        NoVersionFoundForPatternError: If nothing matches.
    """
    if not candidates:
        raise NoVersionsFoundError()

    compiled = re.compile(pattern)

    for candidate in reversed(candidates):
        if compiled.search(candidate):
            return Version.verbatim(candidate)

    raise NoVersionFoundForPatternError(pattern=pattern)


def extract_captures(
    candidates: Sequence[str],
    regex: str,
    kind: FilterKind,
) -> dict[str, str]:
    """Extract the captured value of every candidate.

    Args:
        candidates: Version strings ordered oldest first.
        regex: Regular expression with a "version" group or at least one
            capture group.
        kind: The combination kind being resolved, for error reporting.

    Returns:
        Mapping of extracted value to the raw candidate it came from,
        ordered by the position of that candidate. When several candidates
        yield the same value the most recent one is kept, and the value
        moves to its position, so later sorts break ties by recency.

    Raises:
        re.error: If regex does not compile.
        UnsupportedKindPatternError: If regex has no capture group.
        NoVersionFoundForPatternError: If no candidate yields a value.
    """
    compiled = re.compile(regex)
    if compiled.groups == 0:
        raise UnsupportedKindPatternError(kind=kind.value, pattern=regex)

    group: int | str = CAPTURE_GROUP_NAME if CAPTURE_GROUP_NAME in compiled.groupindex else 1

    captures: dict[str, str] = {}
    for candidate in candidates:
        found = compiled.search(candidate)
        if found is None or found.group(group) is None:
            continue
        value = found.group(group)
        captures.pop(value, None)
        captures[value] = candidate

    if not captures:
        raise NoVersionFoundForPatternError(pattern=regex)

    logger.debug(
        "version_captures_extracted",
        kind=kind.value,
        regex=regex,
        extracted=len(captures),
        candidates=len(candidates),
    )
    return captures
