"""Feature construction from configuration."""

from featureline.config import FeatureConfig
from featureline.core import CompoundCurve
from featureline.domain import FeatureType
from featureline.exceptions import UnknownFeatureTypeError
from featureline.features.railroad import Railroad
from featureline.features.river import River
from featureline.features.road import Road

FEATURE_CLASSES: dict[FeatureType, type[CompoundCurve]] = {
    FeatureType.ROAD: Road,
    FeatureType.RIVER: River,
    FeatureType.RAILROAD: Railroad,
}


def feature_class(name: str | FeatureType) -> type[CompoundCurve]:
    """Look up the feature class for a type or its name.

    Args:
        name: Feature type or its string value (case-insensitive)

    Returns:
        Compound curve subclass implementing the feature

    Raises:
        UnknownFeatureTypeError: If no feature has that name
    """
    try:
        feature_type = FeatureType(name.lower() if isinstance(name, str) else name)
    except ValueError:
        raise UnknownFeatureTypeError(str(name)) from None
    return FEATURE_CLASSES[feature_type]


def create_feature(config: FeatureConfig | None = None) -> CompoundCurve:
    """Build a default-shaped feature from configuration.

    Width and edge line visibility fall back to the feature type's defaults
    when the configuration leaves them unset.

    Args:
        config: Feature configuration (defaults if None)

    Returns:
        New feature with one segment
    """
    config = config or FeatureConfig()
    cls = feature_class(config.feature_type)
    return cls(
        resolution=config.curve.resolution,
        width=config.surface.width,
        centerline=config.centerline,
        edgeline_visible=config.surface.edgeline_visible,
    )
