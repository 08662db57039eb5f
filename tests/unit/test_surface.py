"""Unit tests for offset surface construction.

Tests cover:
- Tangent field sampling
- Normal direction and offset distance
- Fallback for zero-length tangents
- Polygon assembly order and point count
- Edge caching per segment
"""

import math

import pytest

from featureline.core import (
    DEFAULT_NORMAL,
    CompoundCurve,
    CubicCurveSegment,
    assemble_surface,
    edge_curves,
    edge_normals,
    signed_area,
    tangent_points,
)
from featureline.domain import Point


@pytest.fixture
def horizontal() -> CompoundCurve:
    """Straight horizontal segment from (0,0) to (300,0), width 50."""
    return CompoundCurve(
        [Point(0.0, 0.0), Point(100.0, 0.0), Point(200.0, 0.0), Point(300.0, 0.0)],
        resolution=0.25,
        width=50.0,
    )


@pytest.fixture
def bent() -> CompoundCurve:
    """Two segment curve with a gentle bend."""
    curve = CompoundCurve(
        [Point(0.0, 0.0), Point(100.0, 0.0), Point(200.0, 50.0), Point(300.0, 50.0)],
        resolution=0.1,
        width=20.0,
    )
    curve.add_segment(Point(500.0, 0.0), Point(600.0, 0.0))
    return curve


class TestTangentPoints:
    """Tests for tangent sampling."""

    def test_straight_segment(self) -> None:
        """Evenly spaced collinear points have a constant tangent."""
        segment = CubicCurveSegment(
            [Point(0.0, 0.0), Point(100.0, 0.0), Point(200.0, 0.0), Point(300.0, 0.0)], 0.25
        )
        tangents = tangent_points(segment)
        assert tangents == [Point(300.0, 0.0)] * 5

    def test_end_tangents(self) -> None:
        """End tangents are 3 (P1 - P0) and 3 (P3 - P2)."""
        segment = CubicCurveSegment(
            [Point(20.0, 20.0), Point(120.0, 20.0), Point(220.0, 220.0), Point(320.0, 20.0)],
            0.025,
        )
        tangents = tangent_points(segment)
        assert len(tangents) == len(segment.curve())
        assert tangents[0] == Point(300.0, 0.0)
        assert tangents[-1] == Point(300.0, -600.0)

    def test_matches_finite_difference(self) -> None:
        """Sampled tangents agree with a numeric derivative of the curve."""
        segment = CubicCurveSegment(
            [Point(20.0, 20.0), Point(120.0, 20.0), Point(220.0, 220.0), Point(320.0, 20.0)],
            0.1,
        )
        h = 1e-6
        params = segment.parameters()[1:-1]
        tangents = tangent_points(segment)[1:-1]
        assert len(tangents) == 9

        for t, v in zip(params, tangents):
            ahead = segment.point_at(t + h)
            behind = segment.point_at(t - h)
            assert v.x == pytest.approx((ahead.x - behind.x) / (2 * h), rel=1e-4)
            assert v.y == pytest.approx((ahead.y - behind.y) / (2 * h), rel=1e-4, abs=1e-3)


class TestEdgeNormals:
    """Tests for unit normals and the zero-tangent fallback."""

    def test_normal_direction(self) -> None:
        """A tangent along +x has its normal along -y."""
        assert edge_normals([Point(5.0, 0.0)]) == [Point(0.0, -1.0)]

    def test_unit_length(self) -> None:
        """Normals are unit vectors perpendicular to the tangent."""
        tangents = [Point(3.0, 4.0), Point(-2.0, 7.0)]
        for n, v in zip(edge_normals(tangents), tangents):
            assert n.length() == pytest.approx(1.0)
            assert n.x * v.x + n.y * v.y == pytest.approx(0.0)

    def test_zero_tangent_takes_previous(self) -> None:
        """A zero tangent reuses the preceding normal."""
        normals = edge_normals([Point(1.0, 0.0), Point(0.0, 0.0), Point(0.0, 1.0)])
        assert normals == [Point(0.0, -1.0), Point(0.0, -1.0), Point(1.0, 0.0)]

    def test_leading_zero_tangent_takes_next(self) -> None:
        """Zero tangents before any direction reuse the first valid normal."""
        normals = edge_normals([Point(0.0, 0.0), Point(0.0, 0.0), Point(0.0, 2.0)])
        assert normals == [Point(1.0, 0.0)] * 3

    def test_fully_degenerate(self) -> None:
        """Without any direction the default normal is used."""
        normals = edge_normals([Point(0.0, 0.0)] * 4)
        assert normals == [DEFAULT_NORMAL] * 4

    def test_empty(self) -> None:
        """No tangents, no normals."""
        assert edge_normals([]) == []

    def test_coincident_handle_segment(self) -> None:
        """A segment whose first handle sits on its anchor still offsets cleanly."""
        curve = CompoundCurve(
            [Point(0.0, 0.0), Point(0.0, 0.0), Point(200.0, 0.0), Point(300.0, 0.0)],
            resolution=0.25,
            width=10.0,
        )
        surface = curve.surface()
        assert all(math.isfinite(p.x) and math.isfinite(p.y) for p in surface)
        assert surface[0] == Point(0.0, -5.0)

    def test_point_segment(self) -> None:
        """A segment collapsed to one point offsets along the default normal."""
        p = Point(10.0, 10.0)
        curve = CompoundCurve([p, p, p, p], resolution=0.5, width=4.0)
        left, right = curve.calc_edge_curve(0)
        assert left == [Point(10.0, 8.0)] * 3
        assert right == [Point(10.0, 12.0)] * 3


class TestEdgeCurves:
    """Tests for left and right edge construction."""

    def test_horizontal_offsets(self, horizontal: CompoundCurve) -> None:
        """Width 50 shifts the edges by 25 on either side."""
        centerline = horizontal.curve()
        left, right = horizontal.calc_edge_curve(0)
        assert left == [Point(p.x, p.y - 25.0) for p in centerline]
        assert right == [Point(p.x, p.y + 25.0) for p in centerline]

    def test_offset_distance(self, bent: CompoundCurve) -> None:
        """Every edge point lies half a width from its centerline sample."""
        for i, segment in enumerate(bent.segments()):
            left, right = bent.calc_edge_curve(i)
            for p, lp, rp in zip(segment.curve(), left, right):
                assert p.distance(lp) == pytest.approx(10.0)
                assert p.distance(rp) == pytest.approx(10.0)

    def test_zero_width(self, horizontal: CompoundCurve) -> None:
        """A zero width collapses both edges onto the centerline."""
        horizontal.set_width(0.0)
        left, right = horizontal.calc_edge_curve(0)
        assert left == horizontal.curve()
        assert right == horizontal.curve()

    def test_length_mismatch(self) -> None:
        """Curve and tangents must pair up."""
        with pytest.raises(ValueError):
            edge_curves([Point(0.0, 0.0)], [], 10.0)


class TestAssembleSurface:
    """Tests for polygon assembly."""

    def test_order(self) -> None:
        """Lefts run forward, then rights backward in reverse segment order."""
        a, b, c, d = (Point(float(i), 0.0) for i in range(4))
        e, f, g, h = (Point(float(i), 1.0) for i in range(4))
        outline = assemble_surface([[a, b], [c, d]], [[e, f], [g, h]])
        assert outline == [a, b, c, d, h, g, f, e]

    def test_horizontal_outline(self, horizontal: CompoundCurve) -> None:
        """The outline walks the top edge forward and the bottom edge back."""
        surface = horizontal.surface()
        xs = [0.0, 75.0, 150.0, 225.0, 300.0]
        expected = [Point(x, -25.0) for x in xs] + [Point(x, 25.0) for x in reversed(xs)]
        assert surface == expected

    def test_not_closed(self, horizontal: CompoundCurve) -> None:
        """The first point is not repeated at the end."""
        surface = horizontal.surface()
        assert surface[0] != surface[-1]

    def test_point_count(self, bent: CompoundCurve) -> None:
        """Surface has two points per centerline sample of every segment."""
        total = sum(s.sample_count() for s in bent.segments())
        assert len(bent.surface()) == 2 * total

    def test_area_of_straight_band(self, horizontal: CompoundCurve) -> None:
        """A straight band encloses length times width."""
        assert abs(signed_area(horizontal.surface())) == pytest.approx(300.0 * 50.0)


class TestEdgeCaching:
    """Tests for per-segment edge caching."""

    def test_unchanged_segments_reused(self, bent: CompoundCurve) -> None:
        """Only edited segments are rebuilt."""
        bent.surface()
        first_left = bent._edges[0].left
        second_left = bent._edges[1].left

        bent.set_ctrl_point(7, Point(620.0, 10.0))
        bent.surface()

        assert bent._edges[0].left is first_left
        assert bent._edges[1].left is not second_left

    def test_width_rebuilds_all(self, bent: CompoundCurve) -> None:
        """A width change invalidates every segment."""
        bent.surface()
        bent.set_width(40.0)
        surface = bent.surface()
        first = bent.segments()[0].curve()[0]
        assert first.distance(surface[0]) == pytest.approx(20.0)

    def test_replaced_segment_rebuilds(self) -> None:
        """A segment swapped in through mut_segments() gets fresh edges."""
        curve = CompoundCurve(
            [Point(0.0, 0.0), Point(10.0, 0.0), Point(20.0, 0.0), Point(30.0, 0.0)],
            resolution=0.5,
            width=10.0,
        )
        before = curve.surface()

        curve.mut_segments()[0] = CubicCurveSegment(
            [Point(0.0, 100.0), Point(10.0, 100.0), Point(20.0, 100.0), Point(30.0, 100.0)],
            0.5,
        )

        assert curve.modified()
        after = curve.surface()
        assert after != before
        assert after == [
            Point(0.0, 95.0),
            Point(15.0, 95.0),
            Point(30.0, 95.0),
            Point(30.0, 105.0),
            Point(15.0, 105.0),
            Point(0.0, 105.0),
        ]

    def test_inserted_segment_rebuilds(self, bent: CompoundCurve) -> None:
        """Inserting a segment shifts caches without reusing stale edges."""
        bent.surface()
        moved = bent.segments()[1]
        bent.mut_segments().insert(
            1,
            CubicCurveSegment(
                [Point(300.0, 50.0), Point(400.0, 50.0), Point(500.0, 50.0), Point(600.0, 50.0)],
                0.1,
            ),
        )

        surface = bent.surface()
        left, _ = bent.calc_edge_curve(1)
        per_segment = bent.segments()[0].sample_count()
        assert surface[per_segment : 2 * per_segment] == left
        assert left[0] == Point(300.0, 40.0)
        assert bent.calc_edge_curve(2)[0] == surface[2 * per_segment : 3 * per_segment]
        assert bent.segments()[2] is moved

    def test_edit_moves_surface(self, horizontal: CompoundCurve) -> None:
        """Moving the end point moves the surface end."""
        horizontal.surface()
        horizontal.set_ctrl_point(3, Point(400.0, 0.0))
        surface = horizontal.surface()
        assert surface[4] == Point(400.0, -25.0)
        assert surface[5] == Point(400.0, 25.0)


class TestEdgeLines:
    """Tests for whole-chain edge lines."""

    def test_edge_lines(self, bent: CompoundCurve) -> None:
        """Edge lines hold every segment's edge in centerline order."""
        left, right = bent.edge_lines()
        total = sum(s.sample_count() for s in bent.segments())
        assert len(left) == total
        assert len(right) == total
        surface = bent.surface()
        assert surface[: len(left)] == left
        assert surface[len(left):] == list(reversed(right))


class TestBounds:
    """Tests for feature bounds."""

    def test_horizontal_bounds(self, horizontal: CompoundCurve) -> None:
        """Bounds include the band on both sides."""
        bounds = horizontal.bounds()
        assert bounds.x == 0.0
        assert bounds.y == -25.0
        assert bounds.width == 300.0
        assert bounds.height == 50.0
