"""Configuration management for unistroke.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RecognizerConfig: Normalization and matching parameters
- MatchingConfig: Template evaluation settings
- LoggingConfig: Logging settings
- UnistrokeSettings: Main application settings
"""

from unistroke.config.settings import (
    LoggingConfig,
    MatchingConfig,
    RecognizerConfig,
    UnistrokeSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "MatchingConfig",
    "RecognizerConfig",
    "UnistrokeSettings",
    "get_default_settings",
]
