"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from featureline.config import (
    CurveConfig,
    FeatureConfig,
    FeaturelineSettings,
    SurfaceConfig,
    get_default_settings,
)
from featureline.domain import FeatureType


class TestCurveConfig:
    """Tests for CurveConfig."""

    def test_default(self) -> None:
        """Default resolution samples 41 points per segment."""
        assert CurveConfig().resolution == 0.025

    @pytest.mark.parametrize("resolution", [0.0, -0.5, 1.5])
    def test_out_of_range(self, resolution: float) -> None:
        """Resolutions outside (0, 1] are rejected."""
        with pytest.raises(ValidationError):
            CurveConfig(resolution=resolution)

    def test_upper_bound_inclusive(self) -> None:
        """A resolution of 1 is allowed."""
        assert CurveConfig(resolution=1.0).resolution == 1.0


class TestSurfaceConfig:
    """Tests for SurfaceConfig."""

    def test_defaults_unset(self) -> None:
        """Width and edge lines default to the feature type."""
        config = SurfaceConfig()
        assert config.width is None
        assert config.edgeline_visible is None

    def test_negative_width(self) -> None:
        """Negative widths are rejected."""
        with pytest.raises(ValidationError):
            SurfaceConfig(width=-1.0)


class TestSettings:
    """Tests for top-level settings."""

    def test_default_settings(self) -> None:
        """Defaults build a road and log warnings to the console."""
        settings = get_default_settings()
        assert isinstance(settings, FeaturelineSettings)
        assert settings.feature.feature_type is FeatureType.ROAD
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.log_file is None

    def test_feature_type_from_string(self) -> None:
        """Feature types can be given by value."""
        config = FeatureConfig(feature_type="river")
        assert config.feature_type is FeatureType.RIVER

    def test_unknown_feature_type(self) -> None:
        """Unknown feature types are rejected."""
        with pytest.raises(ValidationError):
            FeatureConfig(feature_type="canal")
