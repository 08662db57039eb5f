"""Geometric operations for curve tessellation and offsetting.

This module provides core mathematical utilities for:
- Resolution validation and sample parameter generation
- Cubic and quadratic Bernstein evaluation
- Derivative (hodograph) control points
- Unit normal computation
- Signed area calculation (shoelace formula)

All functions are pure and stateless.
"""

import math

from featureline.domain import Point
from featureline.exceptions import InvalidParameterError


def validate_resolution(resolution: float) -> float:
    """Check that a tessellation step lies in ``(0, 1]``.

    Args:
        resolution: Step size in curve parameter ``t``

    Returns:
        The resolution as a float

    Raises:
        InvalidParameterError: If resolution is not in ``(0, 1]``
    """
    if math.isnan(resolution) or resolution <= 0.0 or resolution > 1.0:
        raise InvalidParameterError("resolution", resolution, "must be in (0, 1]")
    return float(resolution)


def sample_count(resolution: float) -> int:
    """Number of samples produced for a resolution: ``floor(1/resolution) + 1``."""
    return math.floor(1.0 / resolution) + 1


def sample_parameters(resolution: float) -> list[float]:
    """Curve parameters at which a segment is sampled.

    Parameters advance by ``resolution`` from 0. The last parameter is always
    exactly 1.0 so that the final sample lands on the end point without
    floating point drift.

    Args:
        resolution: Step size in ``t``, in ``(0, 1]``

    Returns:
        List of ``sample_count(resolution)`` parameters

    Examples:
        >>> sample_parameters(0.25)
        [0.0, 0.25, 0.5, 0.75, 1.0]
        >>> sample_parameters(0.4)
        [0.0, 0.4, 1.0]
    """
    n = sample_count(resolution)
    params = [k * resolution for k in range(n)]
    params[-1] = 1.0
    return params


def cubic_point(points: tuple[Point, Point, Point, Point], t: float) -> Point:
    """Evaluate a cubic Bezier curve with the Bernstein form.

    ``B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3``

    Args:
        points: Control points [p0, p1, p2, p3]
        t: Curve parameter

    Returns:
        Point on the curve
    """
    p0, p1, p2, p3 = points
    mt = 1.0 - t
    b0 = mt * mt * mt
    b1 = 3.0 * mt * mt * t
    b2 = 3.0 * mt * t * t
    b3 = t * t * t
    return Point(
        b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
    )


def quadratic_point(points: tuple[Point, Point, Point], t: float) -> Point:
    """Evaluate a quadratic Bezier curve: ``(1-t)^2 P0 + 2(1-t) t P1 + t^2 P2``."""
    p0, p1, p2 = points
    mt = 1.0 - t
    b0 = mt * mt
    b1 = 2.0 * mt * t
    b2 = t * t
    return Point(
        b0 * p0.x + b1 * p1.x + b2 * p2.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y,
    )


def derivative_points(
    points: tuple[Point, Point, Point, Point],
) -> tuple[Point, Point, Point]:
    """Control points of the derivative of a cubic Bezier curve.

    The derivative of a cubic is a quadratic with control points
    ``D_i = 3 (P_{i+1} - P_i)``.

    Args:
        points: Cubic control points [p0, p1, p2, p3]

    Returns:
        Quadratic control points [d0, d1, d2]
    """
    p0, p1, p2, p3 = points
    return ((p1 - p0) * 3.0, (p2 - p1) * 3.0, (p3 - p2) * 3.0)


def unit_normal(v: Point) -> Point | None:
    """Unit normal of a tangent vector.

    The normal is ``(v.y, -v.x) / |v|``: for a tangent pointing along +x the
    normal points along -y.

    Args:
        v: Tangent vector

    Returns:
        Unit normal, or None when the tangent has zero length
    """
    length = v.length()
    if length == 0.0 or not math.isfinite(length):
        return None
    return Point(v.y / length, -v.x / length)


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The polygon is implicitly closed from the last point back to the first.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])
        1.0
        >>> signed_area([p1, p4, p3, p2])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0
