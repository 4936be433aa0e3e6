"""Filter inference from a sample version.

Autodiscovery sees a single version in a manifest (an image tag, a chart
version) and needs a filter that will find its successors. infer_filter()
proposes one:

    "1.0.0"        -> semver, strict
    "v1.2"         -> semver, loose
    "1.0.0-alpha"  -> regex ^v?\\d*(\\.\\d*){2}\\-alpha$
    "2.235-jdk11"  -> regex ^v?\\d*(\\.\\d*){1}\\-jdk11$
    "alpine"       -> None
"""

from __future__ import annotations

import re

from versionfilter.domain.errors.version import InvalidSemVerError
from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.models.version_filter import VersionFilter
from versionfilter.domain.services.semver_matcher import parse_semver

_SUFFIXED_VERSION = re.compile(r"^v?\d+(?P<components>(?:\.\d+)*)(?P<suffix>[-+].+)$")


def infer_filter(value: str) -> VersionFilter | None:
    """Propose a filter that matches versions shaped like value.

    A version followed by a "-" or "+" suffix yields a regex filter that
    keeps the number of components and the literal suffix. A plain semantic
    version yields a semver filter, strict when value is a complete
    MAJOR.MINOR.PATCH version.

    Args:
        value: A sample version.

    Returns:
        The proposed filter, or None when value does not look like a version.
    """
    suffixed = _SUFFIXED_VERSION.match(value)
    if suffixed is not None:
        components = suffixed.group("components").count(".")
        return VersionFilter(
            kind=FilterKind.REGEX,
            pattern=rf"^v?\d*(\.\d*){{{components}}}{re.escape(suffixed.group('suffix'))}$",
        )

    try:
        parse_semver(value, strict=True)
    except InvalidSemVerError:
        pass
    else:
        return VersionFilter(kind=FilterKind.SEMVER, strict=True)

    try:
        parse_semver(value)
    except InvalidSemVerError:
        return None
    return VersionFilter(kind=FilterKind.SEMVER)
