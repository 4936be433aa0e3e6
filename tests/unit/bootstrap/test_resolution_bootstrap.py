"""Unit tests for the bootstrap wiring.

Tests verify that the environment reaches both the service configuration
and the structlog configuration, and the singleton overrides.
"""

import json
import os
from unittest.mock import patch

import pytest
import structlog

from versionfilter.application.services.version_resolution_service import (
    VersionResolutionService,
)
from versionfilter.bootstrap import (
    configure_logging,
    get_resolution_service,
    reset_resolution_service,
    set_resolution_service,
)
from versionfilter.config.resolution_config import TEST_RESOLUTION_CONFIG, ResolutionConfig


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_records_configuration(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that the applied settings are logged once configured."""
        configure_logging(ResolutionConfig(log_level="DEBUG"))

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["event"] == "structured_logging_configured"
        assert log_entry["environment"] == "production"
        assert log_entry["log_level"] == "DEBUG"

    def test_suppressed_below_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that the configuration event honors the configured level."""
        configure_logging(ResolutionConfig(log_level="ERROR"))

        assert capsys.readouterr().out.strip() == ""


class TestGetResolutionService:
    """Tests for the resolution service singleton."""

    def test_environment_drives_service_and_logging(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that one environment read configures both."""
        env = {
            "VERSION_FILTER_TIME_LAYOUT": "%Y%m%d",
            "VERSION_FILTER_ENVIRONMENT": "production",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            service = get_resolution_service()

        assert service.config.default_time_layout == "%Y%m%d"
        assert service.config.log_level == "DEBUG"
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

        capsys.readouterr()
        structlog.get_logger().debug("semver_candidate_skipped")
        assert json.loads(capsys.readouterr().out.strip())["level"] == "debug"

    def test_singleton(self) -> None:
        """Test that the same service is returned on every call."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_resolution_service() is get_resolution_service()

    def test_set_and_reset(self) -> None:
        """Test the testing overrides."""
        custom = VersionResolutionService(TEST_RESOLUTION_CONFIG)
        set_resolution_service(custom)
        assert get_resolution_service() is custom

        reset_resolution_service()
        with patch.dict(os.environ, {}, clear=True):
            assert get_resolution_service() is not custom

    def test_invalid_environment(self) -> None:
        """Test that an invalid variable fails at bootstrap."""
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}, clear=True):
            with pytest.raises(ValueError):
                get_resolution_service()
