"""Core curve engine for featureline.

This module contains the algorithms for:

- Geometry operations (Bernstein evaluation, normals, signed area)
- Cubic segment tessellation with lazy caching
- Compound curve editing with tangent continuity across joints
- Offset surface construction from the centerline tangent field

Key functions:
- sample_parameters: Curve parameters for a resolution
- cubic_point: Evaluate a cubic Bezier curve
- tangent_points: Sampled derivative of a segment
- edge_curves: Left and right offset polylines
- assemble_surface: Fill polygon from per-segment edges
- signed_area: Polygon area using the shoelace formula

Key classes:
- CubicCurveSegment: One cubic Bezier with cached tessellation
- CompoundCurve: Chain of tangent-continuous segments with a surface band
"""

from featureline.core.compound import DEFAULT_WIDTH, CompoundCurve
from featureline.core.geometry import (
    cubic_point,
    derivative_points,
    quadratic_point,
    sample_count,
    sample_parameters,
    signed_area,
    unit_normal,
    validate_resolution,
)
from featureline.core.segment import DEFAULT_CTRL_POINTS, DEFAULT_RESOLUTION, CubicCurveSegment
from featureline.core.surface import (
    DEFAULT_NORMAL,
    assemble_surface,
    edge_curves,
    edge_normals,
    tangent_points,
)

__all__ = [
    # Constants
    "DEFAULT_CTRL_POINTS",
    "DEFAULT_NORMAL",
    "DEFAULT_RESOLUTION",
    "DEFAULT_WIDTH",
    # Curve classes
    "CompoundCurve",
    "CubicCurveSegment",
    # Geometry functions
    "cubic_point",
    "derivative_points",
    "quadratic_point",
    "sample_count",
    "sample_parameters",
    "signed_area",
    "unit_normal",
    "validate_resolution",
    # Surface functions
    "assemble_surface",
    "edge_curves",
    "edge_normals",
    "tangent_points",
]
