"""Utility functions for unistroke.

This module provides utility functions including:

- Logging setup and configuration
- Match statistics tracking
"""

from unistroke.utils.logging import (
    MatchLogger,
    MatchStats,
    configure_logging,
)

__all__ = [
    "MatchLogger",
    "MatchStats",
    "configure_logging",
]
