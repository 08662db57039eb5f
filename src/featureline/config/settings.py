"""Configuration settings for Featureline."""

from pathlib import Path

from pydantic import BaseModel, Field

from featureline.domain import CenterLine, FeatureType


class CurveConfig(BaseModel):
    """Configuration for centerline tessellation."""

    resolution: float = Field(
        default=0.025,
        gt=0.0,
        le=1.0,
        description="Step in curve parameter t between samples",
    )


class SurfaceConfig(BaseModel):
    """Configuration for the surface band around the centerline."""

    width: float | None = Field(
        default=None,
        ge=0.0,
        description="Band width (None = feature type default)",
    )
    edgeline_visible: bool | None = Field(
        default=None,
        description="Draw edge lines (None = feature type default)",
    )


class FeatureConfig(BaseModel):
    """Configuration for building a feature."""

    feature_type: FeatureType = Field(
        default=FeatureType.ROAD,
        description="Kind of feature to build",
    )
    centerline: CenterLine | None = Field(
        default=None,
        description="Centerline marking style",
    )
    curve: CurveConfig = Field(default_factory=CurveConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FeaturelineSettings(BaseModel):
    """Main application settings."""

    feature: FeatureConfig = Field(default_factory=FeatureConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FeaturelineSettings:
    """Get default application settings."""
    return FeaturelineSettings()
