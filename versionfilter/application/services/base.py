"""Base service logging mixin.

Services that resolve versions log through LoggingMixin so that every event
names the service, the operation and the filter it was applying.

Usage:
    class ChartVersionService(LoggingMixin):
        def __init__(self) -> None:
            self._init_logger()

        def lookup(self, version_filter: VersionFilter) -> None:
            log = self._log_operation("lookup", version_filter, chart="nginx")
            log.info("chart_lookup_started")
"""

import structlog

from versionfilter.domain.models.version_filter import VersionFilter
from versionfilter.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin providing structured logging for resolution services.

    Attributes:
        _log: Logger bound with service (class name) and component.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "resolution") -> None:
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        version_filter: VersionFilter | None = None,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger.

        Args:
            operation: Name of the operation being performed.
            version_filter: Filter in use; its kind and pattern are bound, and
                its regex when set.
            **context: Additional context to bind.

        Returns:
            BoundLogger carrying the operation, the filter fields and, inside
            a run, the correlation_id.
        """
        bound: dict[str, object] = {"operation": operation}
        if version_filter is not None:
            bound["kind"] = version_filter.kind.value if version_filter.kind else ""
            bound["pattern"] = version_filter.pattern
            if version_filter.regex:
                bound["regex"] = version_filter.regex

        correlation_id = get_correlation_id()
        if correlation_id:
            bound["correlation_id"] = correlation_id

        return self._log.bind(**bound, **context)
