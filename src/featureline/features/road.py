"""Road feature."""

from featureline.core import CompoundCurve
from featureline.domain import FeatureType

DEFAULT_ROAD_WIDTH = 50.0


class Road(CompoundCurve):
    """Paved road: a surface band with an optional centerline marking."""

    feature_type = FeatureType.ROAD
    default_width = DEFAULT_ROAD_WIDTH
    default_edgeline_visible = False
