"""Configuration module for versionfilter.

Available Configurations:
- ResolutionConfig: Default time layout and logging environment
"""

from versionfilter.config.resolution_config import (
    DEFAULT_RESOLUTION_CONFIG,
    TEST_RESOLUTION_CONFIG,
    ResolutionConfig,
)

__all__ = [
    "DEFAULT_RESOLUTION_CONFIG",
    "ResolutionConfig",
    "TEST_RESOLUTION_CONFIG",
]
