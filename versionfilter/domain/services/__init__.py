"""Domain services for versionfilter.

Domain services hold the matching logic that does not belong to the
VersionFilter value object itself. Each matcher is a pure function over an
in-memory candidate list.

Available services:
- search_latest: Last candidate or exact text match
- search_regex / extract_captures: Regular expression scans
- search_semver: Semantic version constraint matching
- search_time: Most recent date under a strptime layout
- greater_than_pattern: Derive a "newer than baseline" pattern
- filter_inference.infer_filter: Propose a filter from a sample version
"""

from versionfilter.domain.services.latest_matcher import LATEST_PATTERN, search_latest
from versionfilter.domain.services.pattern_generator import greater_than_pattern
from versionfilter.domain.services.regex_matcher import extract_captures, search_regex
from versionfilter.domain.services.semver_matcher import (
    parse_constraint,
    parse_semver,
    search_semver,
)
from versionfilter.domain.services.time_matcher import DEFAULT_TIME_LAYOUT, search_time

__all__ = [
    "DEFAULT_TIME_LAYOUT",
    "LATEST_PATTERN",
    "extract_captures",
    "greater_than_pattern",
    "parse_constraint",
    "parse_semver",
    "search_latest",
    "search_regex",
    "search_semver",
    "search_time",
]
