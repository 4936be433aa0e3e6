"""Latest matcher.

With the pattern "latest" the most recent candidate wins outright. Any other
pattern is compared as exact text against the candidates, most recent first.
"""

from __future__ import annotations

from collections.abc import Sequence

from versionfilter.domain.errors.version import (
    NoVersionFoundForPatternError,
    NoVersionsFoundError,
)
from versionfilter.domain.models.version import Version

LATEST_PATTERN = "latest"


def search_latest(candidates: Sequence[str], pattern: str) -> Version:
    """Return the latest candidate, or the most recent exact match of pattern.

    Args:
        candidates: Version strings ordered oldest first.
        pattern: "latest" or the exact text to look for.

    Returns:
        The matching version, verbatim.

    Raises:
        NoVersionsFoundError: If candidates is empty.
        NoVersionFoundForPatternError: If no candidate equals pattern.
    """
    if not candidates:
        raise NoVersionsFoundError()

    if pattern == LATEST_PATTERN:
        return Version.verbatim(candidates[-1])

    for candidate in reversed(candidates):
        if candidate == pattern:
            return Version.verbatim(candidate)

    raise NoVersionFoundForPatternError(pattern=pattern)
