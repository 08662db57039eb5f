"""Tests for domain models to verify they work correctly."""

import math

import pytest

from featureline.domain import CenterLine, Feature, FeatureType, Point, Rect


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_from_tuple(self) -> None:
        """Test point from pair conversion."""
        assert Point.from_tuple((3, 4)) == Point(3.0, 4.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    def test_arithmetic(self) -> None:
        """Test vector arithmetic operators."""
        a = Point(1.0, 2.0)
        b = Point(4.0, 6.0)
        assert a + b == Point(5.0, 8.0)
        assert b - a == Point(3.0, 4.0)
        assert a * 2.0 == Point(2.0, 4.0)
        assert 2.0 * a == Point(2.0, 4.0)
        assert b / 2.0 == Point(2.0, 3.0)
        assert -a == Point(-1.0, -2.0)

    def test_distance(self) -> None:
        """Test Euclidean distance."""
        assert Point(0.0, 0.0).distance(Point(3.0, 4.0)) == 5.0
        assert Point(1.0, 1.0).dist_to_xy(4.0, 5.0) == 5.0

    def test_length(self) -> None:
        """Test vector magnitude."""
        assert Point(3.0, 4.0).length() == 5.0

    def test_reflect(self) -> None:
        """Reflection mirrors a point through the center."""
        assert Point(100.0, 10.0).reflect(Point(150.0, 100.0)) == Point(200.0, 190.0)

    @pytest.mark.parametrize(
        "p, a",
        [
            (Point(0.0, 0.0), Point(0.0, 0.0)),
            (Point(100.0, 10.0), Point(150.0, 100.0)),
            (Point(-7.5, 3.25), Point(12.0, -8.0)),
            (Point(1e6, -1e6), Point(0.5, 0.25)),
        ],
    )
    def test_reflect_involution(self, p: Point, a: Point) -> None:
        """Reflecting twice around the same point gives the original point."""
        assert p.reflect(a).reflect(a) == p

    def test_slope(self) -> None:
        """Test slope of the line between two points."""
        assert Point(0.0, 0.0).slope(Point(2.0, 1.0)) == 0.5
        assert Point(1.0, 1.0).slope(Point(3.0, 1.0)) == 0.0

    def test_slope_vertical_is_nan(self) -> None:
        """Vertical lines have no slope."""
        assert math.isnan(Point(5.0, 0.0).slope(Point(5.0, 10.0)))


class TestRect:
    """Tests for Rect class."""

    def test_contains_inside(self) -> None:
        """Test containment of an interior point."""
        r = Rect(10.0, 10.0, 10.0, 10.0)
        assert r.contains(Point(15.0, 15.0))

    def test_contains_edges(self) -> None:
        """Edges belong to the rectangle."""
        r = Rect(10.0, 10.0, 10.0, 10.0)
        assert r.contains(Point(10.0, 20.0))
        assert r.contains(Point(20.0, 10.0))

    def test_contains_outside(self) -> None:
        """Points beyond any edge are outside."""
        r = Rect(10.0, 10.0, 10.0, 10.0)
        assert not r.contains(Point(15.0, 25.0))
        assert not r.contains(Point(25.0, 15.0))
        assert not r.contains(Point(5.0, 15.0))

    def test_enclosing(self) -> None:
        """Test bounding rectangle of a point set."""
        r = Rect.enclosing([Point(10.0, 20.0), Point(100.0, 30.0), Point(50.0, 150.0)])
        assert r == Rect(10.0, 20.0, 90.0, 130.0)

    def test_enclosing_empty(self) -> None:
        """Empty point sets give a zero rectangle."""
        assert Rect.enclosing([]) == Rect(0.0, 0.0, 0.0, 0.0)

    def test_to_dict(self) -> None:
        """Test dictionary form."""
        assert Rect(1.0, 2.0, 3.0, 4.0).to_dict() == {
            "x": 1.0,
            "y": 2.0,
            "width": 3.0,
            "height": 4.0,
        }


class TestEnums:
    """Tests for feature enums."""

    def test_feature_type_values(self) -> None:
        """Feature types map to their names."""
        assert FeatureType("road") is FeatureType.ROAD
        assert FeatureType("river") is FeatureType.RIVER
        assert FeatureType("railroad") is FeatureType.RAILROAD

    def test_centerline_values(self) -> None:
        """Centerline styles map to their names."""
        assert CenterLine("double_solid") is CenterLine.DOUBLE_SOLID


class TestFeatureProtocol:
    """Tests for the Feature capability protocol."""

    def test_structural_match(self) -> None:
        """Any object with the three methods is a Feature."""

        class Stub:
            def ctrl_points(self) -> int:
                return 0

            def ctrl_point(self, idx: int) -> Point | None:
                return None

            def set_ctrl_point(self, idx: int, point: Point) -> None:
                pass

        assert isinstance(Stub(), Feature)

    def test_missing_method(self) -> None:
        """Objects without the setter are not Features."""

        class ReadOnly:
            def ctrl_points(self) -> int:
                return 0

            def ctrl_point(self, idx: int) -> Point | None:
                return None

        assert not isinstance(ReadOnly(), Feature)
