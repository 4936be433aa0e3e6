"""
Pytest configuration and shared fixtures for versionfilter tests.

Testing Standards:
- Async tests run in pytest-asyncio auto mode (configured in pyproject.toml)
- Unit tests go in tests/unit/<layer>/
- Candidate lists are always ordered oldest first, as producers deliver them
"""

from collections.abc import Iterator

import pytest
import structlog

from versionfilter.bootstrap import reset_resolution_service
from versionfilter.infrastructure.observability.correlation import set_correlation_id


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from versionfilter import __version__

    return __version__


@pytest.fixture
def release_candidates() -> list[str]:
    """Loosely formed release versions, oldest first."""
    return ["1.0", "2.0", "3.0"]


@pytest.fixture
def prefixed_candidates() -> list[str]:
    """Tag-style candidates that are not semantic versions."""
    return ["updatecli-1.0", "updatecli-2.0", "updatecli-3.0"]


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore structlog defaults and process-wide state after each test."""
    yield
    structlog.reset_defaults()
    set_correlation_id("")
    reset_resolution_service()
