"""Railroad feature."""

from featureline.core import CompoundCurve
from featureline.domain import FeatureType

DEFAULT_RAILROAD_WIDTH = 12.0


class Railroad(CompoundCurve):
    """Railroad: a narrow track bed band."""

    feature_type = FeatureType.RAILROAD
    default_width = DEFAULT_RAILROAD_WIDTH
    default_edgeline_visible = False
