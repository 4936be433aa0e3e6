"""Version filter configuration models.

Pydantic models for the "versionfilter" block users write in manifests and
for the values handed back to callers.

Example manifest block:
    versionfilter:
      kind: semver
      pattern: "~2"
      strict: false
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from versionfilter.domain.models.filter_kind import FilterKind
from versionfilter.domain.models.version import Version
from versionfilter.domain.models.version_filter import VersionFilter


class VersionFilterSpec(BaseModel):
    """Raw version filter configuration.

    The kind is kept as text here; to_filter() narrows it to FilterKind,
    which is where an unknown kind fails with UnsupportedKindError.

    Attributes:
        kind: latest, regex, semver, time, regex-semver or regex-time.
        pattern: Kind-specific pattern.
        regex: Capture regex for regex-semver and regex-time.
        strict: Reject loosely formed semantic versions.
    """

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(
        default="",
        description="Version kind (latest, regex, semver, time, regex-semver, regex-time)",
        examples=["semver"],
    )
    pattern: str = Field(
        default="",
        description="Pattern interpreted according to kind",
        examples=["~2", "^v\\d+\\.\\d+$", "%Y-%m-%d"],
    )
    regex: str = Field(
        default="",
        description="Capture regex used by regex-semver and regex-time",
        examples=["^release-(\\d+\\.\\d+\\.\\d+)$"],
    )
    strict: bool = Field(
        default=False,
        description="Only accept complete MAJOR.MINOR.PATCH versions (semver kinds)",
    )

    @field_validator("kind")
    @classmethod
    def normalize_kind(cls, v: str) -> str:
        """Strip surrounding whitespace and lowercase the kind."""
        return v.strip().lower()

    def to_filter(self) -> VersionFilter:
        """Narrow to a domain VersionFilter.

        Raises:
            UnsupportedKindError: If kind is not a supported kind.
        """
        return VersionFilter(
            kind=FilterKind.parse(self.kind) if self.kind else None,
            pattern=self.pattern,
            regex=self.regex,
            strict=self.strict,
        )

    @classmethod
    def from_filter(cls, version_filter: VersionFilter) -> "VersionFilterSpec":
        """Build the configuration block for a domain filter."""
        return cls(**version_filter.to_dict())


class VersionResponse(BaseModel):
    """A resolved version.

    Attributes:
        parsed: Normalized version, e.g. "2.0.0".
        original: Candidate exactly as found, e.g. "v2.0".
    """

    model_config = ConfigDict(frozen=True)

    parsed: str = Field(..., description="Normalized version")
    original: str = Field(..., description="Candidate exactly as found")

    @classmethod
    def from_version(cls, version: Version) -> "VersionResponse":
        return cls(parsed=version.parsed, original=version.original)


class GeneratedFilterResponse(BaseModel):
    """Filter generated for a baseline, ready to embed in configuration.

    Attributes:
        baseline: The version the pattern was derived from.
        versionfilter: The generated filter block.
    """

    model_config = ConfigDict(frozen=True)

    baseline: str = Field(..., description="Version the pattern was derived from")
    versionfilter: VersionFilterSpec = Field(..., description="Generated filter block")

    @classmethod
    def from_filter(cls, baseline: str, version_filter: VersionFilter) -> "GeneratedFilterResponse":
        return cls(baseline=baseline, versionfilter=VersionFilterSpec.from_filter(version_filter))
