"""Smoke tests for the package layout."""

import versionfilter
from versionfilter import FilterKind, Version, VersionFilter


class TestPackage:
    """Tests for the top-level package."""

    def test_version_matches_fixture(self, project_version: str) -> None:
        """Test that __version__ is exposed."""
        assert versionfilter.__version__ == project_version

    def test_public_api_exports(self) -> None:
        """Test that the main types are importable from the package root."""
        assert set(versionfilter.__all__) >= {"FilterKind", "Version", "VersionFilter"}
        assert VersionFilter(kind=FilterKind.LATEST).init().search(["a"]) == Version("a", "a")
