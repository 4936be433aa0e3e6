"""Time matcher.

Candidates are parsed as dates with a strptime layout; the most recent date
wins. Candidates that do not parse are ignored.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import structlog

from versionfilter.domain.errors.version import NoValidDateFoundError, NoVersionsFoundError
from versionfilter.domain.models.version import Version

logger = structlog.get_logger()

DEFAULT_TIME_LAYOUT = "%Y-%m-%d"


def sort_dates(candidates: Sequence[str], layout: str) -> list[tuple[datetime, str]]:
    """Parse candidates under layout and sort them oldest first.

    The sort is stable, so among equal dates the input order is kept.

    Args:
        candidates: Date-like version strings ordered oldest first.
        layout: strptime format, e.g. "%Y-%m-%d" or "%Y%m%d%H%M".

    Returns:
        (parsed date, original candidate) pairs, oldest first.
    """
    parsed: list[tuple[datetime, str]] = []
    for candidate in candidates:
        try:
            parsed.append((datetime.strptime(candidate, layout), candidate))
        except ValueError:
            logger.debug("date_candidate_skipped", candidate=candidate, layout=layout)

    parsed.sort(key=lambda item: item[0])
    return parsed


def search_time(candidates: Sequence[str], layout: str = DEFAULT_TIME_LAYOUT) -> Version:
    """Return the candidate with the most recent date.

    Args:
        candidates: Date-like version strings ordered oldest first.
        layout: strptime format the candidates are written in.

    Returns:
        The winning candidate, verbatim.

    Raises:
        NoVersionsFoundError: If candidates is empty.
        NoValidDateFoundError: If no candidate parses under layout.
    """
    if not candidates:
        raise NoVersionsFoundError()

    ranked = sort_dates(candidates, layout)
    if not ranked:
        raise NoValidDateFoundError(layout=layout)

    _, original = ranked[-1]
    return Version.verbatim(original)
