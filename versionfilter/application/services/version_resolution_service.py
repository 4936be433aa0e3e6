"""Version resolution service.

The seam used by everything that needs a "which version is this" decision:
sources report the resolved version, conditions compare it against a
target, and autodiscovery generators derive the filter they embed in the
configuration they emit.

    configured filter ──► default_filter() ──► resolve(candidates) ──► Version
                                        │
                                        └──► next_filter(baseline) ──► VersionFilter
"""

from __future__ import annotations

from collections.abc import Sequence

from versionfilter.application.services.base import LoggingMixin
from versionfilter.config.resolution_config import DEFAULT_RESOLUTION_CONFIG, ResolutionConfig
from versionfilter.domain.exceptions import VersionFilterError
from versionfilter.domain.models.version import Version
from versionfilter.domain.models.version_filter import VersionFilter
from versionfilter.domain.services.filter_inference import infer_filter


class VersionResolutionService(LoggingMixin):
    """Resolves versions and generates follow-up filters.

    Thread Safety:
        This service is stateless. Filters are immutable values, so a
        pattern override never leaks into a filter shared with another
        caller.
    """

    def __init__(self, config: ResolutionConfig | None = None) -> None:
        """Initialize the service.

        Args:
            config: Resolution settings. Defaults to DEFAULT_RESOLUTION_CONFIG.
        """
        self._config = config or DEFAULT_RESOLUTION_CONFIG
        self._init_logger()

    @property
    def config(self) -> ResolutionConfig:
        return self._config

    def default_filter(
        self, version_filter: VersionFilter, fallback: VersionFilter
    ) -> VersionFilter:
        """Substitute an ecosystem default when nothing was configured.

        Args:
            version_filter: The filter as configured by the user.
            fallback: Ecosystem default, e.g. semver "*" for chart lookups.

        Returns:
            fallback when version_filter is entirely unset, else version_filter.
        """
        if version_filter.is_zero():
            self._log_operation("default_filter", fallback).debug("version_filter_defaulted")
            return fallback
        return version_filter

    def resolve(
        self,
        version_filter: VersionFilter,
        candidates: Sequence[str],
        pattern_override: str | None = None,
    ) -> Version:
        """Normalize the filter and search the candidates.

        Args:
            version_filter: Filter as configured.
            candidates: Version strings ordered oldest first.
            pattern_override: Pattern supplied by a chained source, used for
                this search only.

        Returns:
            The resolved version.

        Raises:
            VersionFilterError: If the filter is invalid or nothing matches.
            re.error: If a configured regular expression does not compile.
        """
        normalized = version_filter.init(time_layout=self._config.default_time_layout)
        if pattern_override:
            normalized = normalized.with_pattern(pattern_override)

        log = self._log_operation("resolve", normalized)

        try:
            found = normalized.search(candidates)
        except VersionFilterError as exc:
            log.warning(
                "version_resolution_failed",
                error_type=type(exc).__name__,
                error=str(exc),
                candidates=len(candidates),
            )
            raise

        log.info("version_resolved", parsed=found.parsed, original=found.original)
        return found

    def next_filter(self, version_filter: VersionFilter, baseline: str) -> VersionFilter:
        """Build the filter that finds versions newer than baseline.

        The generated filter keeps the kind, capture regex and strictness of
        version_filter; only the pattern is derived from baseline.

        Args:
            version_filter: Filter as configured for the autodiscovery run.
            baseline: Version currently found in the manifest.

        Returns:
            The filter to embed in generated configuration.

        Raises:
            VersionFilterError: If no pattern can be derived.
        """
        normalized = version_filter.init(time_layout=self._config.default_time_layout)
        log = self._log_operation("next_filter", normalized, baseline=baseline)

        try:
            pattern = normalized.greater_than_pattern(baseline)
        except VersionFilterError as exc:
            log.warning(
                "version_pattern_generation_failed",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        log.info("version_pattern_generated", generated_pattern=pattern)
        return normalized.with_pattern(pattern)

    def infer_filter(self, value: str) -> VersionFilter | None:
        """Propose a filter from a sample version found in a manifest.

        Args:
            value: A version as written in the manifest.

        Returns:
            The proposed filter, or None if value does not look like a version.
        """
        inferred = infer_filter(value)
        self._log_operation("infer_filter", value=value).debug(
            "version_filter_inferred",
            inferred=inferred.to_dict() if inferred else None,
        )
        return inferred
