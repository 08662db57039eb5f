"""Offset surface construction around a centerline.

The surface of a feature is the band between two curves running parallel to
the centerline at half the feature width on either side. Each centerline
segment contributes a left and a right edge polyline; the fill polygon walks
every left edge forward and then every right edge backward.

Key functions:
- tangent_points: Sampled first derivative of a segment
- edge_normals: Unit normals with a fallback for zero-length tangents
- edge_curves: Left and right offset polylines for one segment
- assemble_surface: Fill polygon from per-segment edges
"""

import logging

from featureline.core.geometry import derivative_points, quadratic_point, unit_normal
from featureline.core.segment import CubicCurveSegment
from featureline.domain import Point

logger = logging.getLogger(__name__)

# Normal of a tangent pointing along +x, used when a segment has no direction.
DEFAULT_NORMAL = Point(0.0, -1.0)


def tangent_points(segment: CubicCurveSegment) -> list[Point]:
    """Sample the tangent field of a segment.

    The derivative of the cubic is the quadratic with control points
    ``3 (P_{i+1} - P_i)``. It is sampled at the same parameters as the
    segment's tessellation, so the k-th tangent belongs to the k-th curve point.

    Args:
        segment: Segment to differentiate

    Returns:
        Tangent vectors, one per centerline sample
    """
    derivative = derivative_points(segment.ctrl_points())
    return [quadratic_point(derivative, t) for t in segment.parameters()]


def edge_normals(tangents: list[Point]) -> list[Point]:
    """Unit normals for a run of tangents.

    A zero-length tangent (for example at an end point whose handle sits on
    the anchor) has no direction of its own. It takes the normal of the
    nearest preceding sample with a direction, or failing that the nearest
    following one. If no sample has a direction, every normal is
    ``DEFAULT_NORMAL``.

    Args:
        tangents: Tangent vectors of one segment

    Returns:
        One unit normal per tangent
    """
    normals = [unit_normal(v) for v in tangents]
    first_valid = next((n for n in normals if n is not None), None)

    if first_valid is None:
        if normals:
            logger.debug("Degenerate segment: %d samples without direction", len(normals))
        return [DEFAULT_NORMAL] * len(normals)

    resolved: list[Point] = []
    previous = first_valid
    degenerate = 0
    for normal in normals:
        if normal is None:
            degenerate += 1
            resolved.append(previous)
        else:
            resolved.append(normal)
            previous = normal

    if degenerate:
        logger.debug("Zero-length tangents replaced: %d", degenerate)

    return resolved


def edge_curves(
    curve: list[Point], tangents: list[Point], width: float
) -> tuple[list[Point], list[Point]]:
    """Offset a centerline polyline to both sides.

    For each sample the unit normal ``n`` gives the left edge point
    ``p + n * width/2`` and the right edge point ``p - n * width/2``.

    Args:
        curve: Centerline samples of one segment
        tangents: Tangent vectors matching ``curve``
        width: Full band width

    Returns:
        Tuple of (left edge, right edge), both in centerline order

    Raises:
        ValueError: If curve and tangents differ in length
    """
    if len(curve) != len(tangents):
        raise ValueError(
            f"Expected one tangent per curve point, got {len(tangents)} for {len(curve)}"
        )

    half = width / 2.0
    left: list[Point] = []
    right: list[Point] = []
    for p, n in zip(curve, edge_normals(tangents)):
        offset = n * half
        left.append(p + offset)
        right.append(p - offset)

    return left, right


def assemble_surface(lefts: list[list[Point]], rights: list[list[Point]]) -> list[Point]:
    """Join per-segment edges into one fill polygon.

    All left edges in centerline order are followed by all right edges in
    reverse order, each walked backward, so the boundary runs around the band
    without crossing itself on gentle curves. The polygon is left open: the
    last point is not a copy of the first.

    Args:
        lefts: Left edge of every segment, in centerline order
        rights: Right edge of every segment, in centerline order

    Returns:
        Polygon outline
    """
    outline = [p for left in lefts for p in left]
    for right in reversed(rights):
        outline.extend(reversed(right))
    return outline
