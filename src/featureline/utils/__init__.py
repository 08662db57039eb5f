"""Utility functions for featureline.

This module provides utility functions including:

- Logging setup and configuration
- Edit and rebuild statistics
"""

from featureline.utils.logging import (
    EditStats,
    FeatureLogger,
    configure_logging,
)

__all__ = [
    "EditStats",
    "FeatureLogger",
    "configure_logging",
]
