"""Version result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Version:
    """A version picked by a matcher.

    Attributes:
        parsed: Normalized value in the matcher's own domain, e.g. the
            always-expanded ``major.minor.patch`` for semver.
        original: The verbatim candidate string as it appeared in the input.
            Use this, not ``parsed``, to recreate a tag.

    Example:
        >>> Version(parsed="2.0.0", original="v2.0")
        Version(parsed='2.0.0', original='v2.0')
    """

    parsed: str
    original: str

    @classmethod
    def verbatim(cls, candidate: str) -> Version:
        """Build a version whose parsed value is the candidate itself."""
        return cls(parsed=candidate, original=candidate)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {"parsed": self.parsed, "original": self.original}

    def __str__(self) -> str:
        return self.parsed
