"""Correlation IDs for tracing resolutions.

One pipeline run (a source lookup, a condition check or an autodiscovery
pass) usually triggers several resolutions. Running them inside
run_scope() tags every event they log with the same correlation_id, while
concurrent runs in other tasks keep their own.

Usage:
    with run_scope() as run_id:
        service.resolve(version_filter, tags)
        service.next_filter(version_filter, current)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Return a new random (UUID4) correlation ID."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the correlation ID of the current run, or "" outside a run."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the rest of the current context.

    Prefer run_scope(), which restores the previous ID on exit.
    """
    _correlation_id.set(correlation_id)


@contextmanager
def run_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Tag everything logged inside the block with one correlation ID.

    Args:
        correlation_id: ID supplied by the caller, e.g. a pipeline run ID.
            A new one is generated when omitted.

    Yields:
        The correlation ID in effect inside the block.
    """
    run_id = correlation_id or generate_correlation_id()
    token = _correlation_id.set(run_id)
    try:
        yield run_id
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding the current correlation_id.

    An explicitly bound correlation_id is left untouched; nothing is added
    outside a run.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
