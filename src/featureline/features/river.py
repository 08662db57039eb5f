"""River feature."""

from featureline.core import CompoundCurve
from featureline.domain import FeatureType

DEFAULT_RIVER_WIDTH = 30.0


class River(CompoundCurve):
    """River: a water surface band outlined by its bank lines."""

    feature_type = FeatureType.RIVER
    default_width = DEFAULT_RIVER_WIDTH
    default_edgeline_visible = True
