"""Unit tests for the semantic version matcher.

Tests verify that:
- loose parsing accepts a "v" prefix and partial versions
- strict parsing only accepts complete MAJOR.MINOR.PATCH versions
- constraints use the npm range grammar plus the Go-style spellings
- the highest matching version wins and ties prefer the later candidate
"""

import pytest

from versionfilter.domain.errors.version import (
    IncorrectSemVerConstraintError,
    InvalidSemVerError,
    NoValidSemVerFoundError,
    NoVersionFoundForPatternError,
    NoVersionsFoundError,
)
from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.models.version import Version
from versionfilter.domain.models.version_filter import VersionFilter
from versionfilter.domain.services.semver_matcher import (
    is_constraint,
    parse_constraint,
    parse_semver,
    search_semver,
    sort_semver,
)


class TestParseSemver:
    """Tests for parse_semver()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1.2.3", "1.2.3"),
            ("v1.2.3", "1.2.3"),
            ("v2.1", "2.1.0"),
            ("3", "3.0.0"),
            ("1.0.0-rc.1", "1.0.0-rc.1"),
            ("1.0.0+build.5", "1.0.0+build.5"),
            ("v1.2-beta", "1.2.0-beta"),
        ],
    )
    def test_loose(self, value: str, expected: str) -> None:
        """Test that the loose grammar normalizes to MAJOR.MINOR.PATCH."""
        assert str(parse_semver(value)) == expected

    @pytest.mark.parametrize("value", ["alpine", "1.2.3.4", "", "1.x", "updatecli-1.0"])
    def test_loose_rejects(self, value: str) -> None:
        """Test that non-versions are rejected."""
        with pytest.raises(InvalidSemVerError) as exc_info:
            parse_semver(value)
        assert exc_info.value.version == value

    def test_strict_accepts_complete_version(self) -> None:
        """Test that strict parsing accepts a full version."""
        assert str(parse_semver("1.2.3-rc.1", strict=True)) == "1.2.3-rc.1"

    @pytest.mark.parametrize("value", ["v1.2.3", "1.2", "1", "1.2.3.4"])
    def test_strict_rejects(self, value: str) -> None:
        """Test that strict parsing rejects prefixes and partial versions."""
        with pytest.raises(InvalidSemVerError):
            parse_semver(value, strict=True)


class TestParseConstraint:
    """Tests for parse_constraint()."""

    @pytest.mark.parametrize(
        "constraint",
        ["~2", "^1.2", "1.2.x", "*", ">=1.0.0 <2.0.0", "1.2.3 || >1.3", "1.0.0 - 2.0.0"],
    )
    def test_valid(self, constraint: str) -> None:
        """Test that npm ranges parse."""
        assert is_constraint(constraint)

    def test_commas_and_operator_spaces(self) -> None:
        """Test that Go-style comma ranges are normalized."""
        spec = parse_constraint(">= 1.0, < 2.0")

        assert spec.match(parse_semver("1.5.0"))
        assert not spec.match(parse_semver("2.0.0"))

    @pytest.mark.parametrize("constraint", ["xyz", "~>1.0 foo", ">=a.b"])
    def test_invalid(self, constraint: str) -> None:
        """Test that garbage raises IncorrectSemVerConstraintError."""
        with pytest.raises(IncorrectSemVerConstraintError) as exc_info:
            parse_constraint(constraint)
        assert exc_info.value.constraint == constraint

    def test_is_constraint_false(self) -> None:
        """Test that is_constraint() reports invalid input."""
        assert not is_constraint("latest")

    @pytest.mark.parametrize(
        ("constraint", "version", "expected"),
        [
            ("!=3.1.0", "3.2.0", True),
            ("!=3.1.0", "3.1.0", False),
            ("!= 1.2.x", "1.2.5", False),
            ("!= 1.2.x", "1.3.0", True),
            (">=1.0, !=1.5.0", "1.5.0", False),
            (">=1.0, !=1.5.0", "1.6.0", True),
            ("<1.0 || !=2.0.0", "2.0.0", False),
            ("<1.0 || !=2.0.0", "3.0.0", True),
            (">=v1.0.0", "1.0.0", True),
            (">=v1.0.0", "0.9.0", False),
            ("v1.0.0 - v2.0.0", "1.5.0", True),
            ("~>1.2", "1.2.9", True),
            ("~>1.2", "1.3.0", False),
            ("~> 1.2.3", "1.2.4", True),
        ],
    )
    def test_go_style_spellings(self, constraint: str, version: str, expected: bool) -> None:
        """Test exclusions, v prefixes and the pessimistic operator."""
        assert parse_constraint(constraint).match(parse_semver(version)) is expected

    def test_invalid_exclusion(self) -> None:
        """Test that a malformed exclusion target is rejected."""
        with pytest.raises(IncorrectSemVerConstraintError):
            parse_constraint("!=abc")

    def test_prerelease_identifier_keeps_v(self) -> None:
        """Test that a "v" inside a prerelease is not treated as a prefix."""
        constraint = parse_constraint("=1.0.0-v1")
        assert constraint.match(parse_semver("1.0.0-v1"))


class TestSortSemver:
    """Tests for sort_semver()."""

    def test_descending(self) -> None:
        """Test that versions are sorted highest first, numerically."""
        ranked = sort_semver(["1.2.0", "1.10.0", "1.9.3"])
        assert [original for _, original in ranked] == ["1.10.0", "1.9.3", "1.2.0"]

    def test_skips_unparsable(self) -> None:
        """Test that non-versions are dropped."""
        ranked = sort_semver(["1.0.0", "nightly", "2.0.0"])
        assert [original for _, original in ranked] == ["2.0.0", "1.0.0"]

    def test_prerelease_below_release(self) -> None:
        """Test semver precedence of prereleases."""
        ranked = sort_semver(["1.0.0", "1.0.0-rc.1", "1.0.0-beta"])
        assert [original for _, original in ranked] == ["1.0.0", "1.0.0-rc.1", "1.0.0-beta"]

    def test_ties_prefer_later_candidate(self) -> None:
        """Test that equal versions rank the most recent input first."""
        ranked = sort_semver(["v1.0", "1.0.0"])
        assert [original for _, original in ranked] == ["1.0.0", "v1.0"]

    def test_strict_filters_partial_versions(self) -> None:
        """Test that strict mode skips loose-only candidates."""
        ranked = sort_semver(["v2.0.0", "1.0.0", "3.0"], strict=True)
        assert [original for _, original in ranked] == ["1.0.0"]


class TestSearchSemver:
    """Tests for search_semver()."""

    def test_tilde(self, release_candidates: list[str]) -> None:
        """Test that ~2 finds 2.0."""
        assert search_semver(release_candidates, "~2") == Version("2.0.0", "2.0")

    def test_no_match(self, release_candidates: list[str]) -> None:
        """Test that ~9 finds nothing."""
        with pytest.raises(NoVersionFoundForPatternError) as exc_info:
            search_semver(release_candidates, "~9")
        assert exc_info.value.pattern == "~9"

    def test_invalid_constraint(self, release_candidates: list[str]) -> None:
        """Test that an unparsable constraint is reported."""
        with pytest.raises(IncorrectSemVerConstraintError):
            search_semver(release_candidates, "xyz")

    def test_empty_constraint_returns_max(self) -> None:
        """Test that no constraint returns the highest version."""
        found = search_semver(["1.0.0", "1.1.0-rc.1", "0.9.0"], "")
        assert found == Version("1.1.0-rc.1", "1.1.0-rc.1")

    def test_wildcard_excludes_prereleases(self) -> None:
        """Test that '*' follows npm prerelease rules."""
        found = search_semver(["1.0.0", "1.1.0-rc.1", "0.9.0"], "*")
        assert found == Version("1.0.0", "1.0.0")

    def test_v_prefix_preserved_in_original(self) -> None:
        """Test that original keeps the candidate as written."""
        found = search_semver(["v1.0.0", "v1.2.0", "v2.0.0"], "^1")
        assert found == Version(parsed="1.2.0", original="v1.2.0")

    def test_strict_skips_prefixed(self) -> None:
        """Test that strict mode ignores prefixed tags."""
        found = search_semver(["1.1.0", "v1.2.0"], "^1", strict=True)
        assert found.original == "1.1.0"

    def test_tie_prefers_later_candidate(self) -> None:
        """Test that equal versions resolve to the most recent candidate."""
        assert search_semver(["1.0.0", "v1.0"], "*").original == "v1.0"

    @pytest.mark.parametrize(
        ("constraint", "expected"),
        [("!=3.2.0", "3.1.0"), ("<3.2 !=3.1.0", "3.0.0"), (">=v3.1.0", "3.2.0"), ("~>3.1", "3.1.0")],
    )
    def test_go_style_constraint_search(self, constraint: str, expected: str) -> None:
        """Test that Go-style constraints select through the filter."""
        version_filter = VersionFilter(kind=FilterKind.SEMVER, pattern=constraint).init()
        assert version_filter.search(["3.0.0", "3.1.0", "3.2.0"]).original == expected

    def test_comma_constraint(self) -> None:
        """Test that a comma range selects within bounds."""
        found = search_semver(["0.9.0", "1.4.0", "2.1.0"], ">= 1.0, < 2.0")
        assert found.original == "1.4.0"

    def test_no_valid_semver(self, prefixed_candidates: list[str]) -> None:
        """Test that no parsable candidate raises NoValidSemVerFoundError."""
        with pytest.raises(NoValidSemVerFoundError):
            search_semver(prefixed_candidates, "*")

    def test_empty_candidates(self) -> None:
        """Test that an empty list raises NoVersionsFoundError."""
        with pytest.raises(NoVersionsFoundError):
            search_semver([], "*")

    def test_round_trip(self) -> None:
        """Test that parsed and original denote the same version."""
        found = search_semver(["v0.1", "v0.3", "v0.2.9"], "")
        assert parse_semver(found.parsed) == parse_semver(found.original)
