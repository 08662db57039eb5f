"""Concrete linear features.

Every feature is a compound Bezier curve with its own default surface width
and edge line visibility. They all expose the same control point editing
capability, so editors can handle them without knowing the kind.

Key classes:
- Road: Paved road with optional centerline marking
- River: Water band with visible bank lines
- Railroad: Narrow track bed

Key functions:
- create_feature: Build a feature from a FeatureConfig
- feature_class: Look up the class for a feature type name
"""

from featureline.features.factory import FEATURE_CLASSES, create_feature, feature_class
from featureline.features.railroad import DEFAULT_RAILROAD_WIDTH, Railroad
from featureline.features.river import DEFAULT_RIVER_WIDTH, River
from featureline.features.road import DEFAULT_ROAD_WIDTH, Road

__all__ = [
    "DEFAULT_RAILROAD_WIDTH",
    "DEFAULT_RIVER_WIDTH",
    "DEFAULT_ROAD_WIDTH",
    "FEATURE_CLASSES",
    "Railroad",
    "River",
    "Road",
    "create_feature",
    "feature_class",
]
