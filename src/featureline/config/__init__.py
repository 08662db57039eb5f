"""Configuration management for featureline.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CurveConfig: Tessellation settings
- SurfaceConfig: Surface band settings
- FeatureConfig: Feature construction settings
- LoggingConfig: Logging settings
- FeaturelineSettings: Main application settings
"""

from featureline.config.settings import (
    CurveConfig,
    FeatureConfig,
    FeaturelineSettings,
    LoggingConfig,
    SurfaceConfig,
    get_default_settings,
)

__all__ = [
    "CurveConfig",
    "FeatureConfig",
    "FeaturelineSettings",
    "LoggingConfig",
    "SurfaceConfig",
    "get_default_settings",
]
