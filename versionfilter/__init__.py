"""
versionfilter - Version resolution engine

Picks one version out of a list of candidate version strings according to a
declarative policy (latest, regex, semver, time and the regex capture
combinations), and derives forward-looking patterns that only match versions
newer than a known baseline under the same policy.

Typical use:

    from versionfilter import VersionFilter

    version_filter = VersionFilter(kind="semver", pattern="~2").init()
    found = version_filter.search(["1.0", "2.0", "3.0"])
    found.parsed    # "2.0.0"
    found.original  # "2.0"
"""

from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.models.version import Version
from versionfilter.domain.models.version_filter import VersionFilter

__version__ = "0.1.0"
__all__ = ["FilterKind", "Version", "VersionFilter", "__version__"]
