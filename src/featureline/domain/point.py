"""Core geometric value types.

This module defines the fundamental geometric types used throughout featureline:
- Point: A 2D point, also used as a free vector (tangents, normals)
- Rect: An axis-aligned rectangle
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the 2D plane.

    Immutable and hashable for use in sets/dicts. The same type doubles as a
    vector: tangents and normals produced by the surface builder are Points
    whose coordinates are direction components.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def distance(self, p: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - p.x, self.y - p.y)

    def dist_to_xy(self, x: float, y: float) -> float:
        """Euclidean distance to raw coordinates."""
        return math.hypot(self.x - x, self.y - y)

    def reflect(self, around: "Point") -> "Point":
        """Reflect this point through another point.

        ``p.reflect(a) == a + (a - p)``. Reflection is an involution, so
        reflecting twice around the same point gives back the original.

        Args:
            around: Center of the reflection

        Returns:
            Mirrored point

        Examples:
            >>> Point(100.0, 10.0).reflect(Point(150.0, 100.0))
            Point(x=200.0, y=190.0)
        """
        return Point(around.x + (around.x - self.x), around.y + (around.y - self.y))

    def slope(self, p: "Point") -> float:
        """Slope of the line from this point to ``p``.

        Returns:
            ``(p.y - y) / (p.x - x)``, or NaN when the line is vertical
        """
        cx = p.x - self.x
        if cx == 0.0:
            return math.nan
        return (p.y - self.y) / cx

    def length(self) -> float:
        """Magnitude of the point taken as a vector."""
        return math.hypot(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, data: tuple[float, float] | list[float]) -> "Point":
        """Build a point from an (x, y) pair."""
        x, y = data
        return cls(float(x), float(y))


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle.

    Attributes:
        x: Left edge
        y: Top edge (smallest y)
        width: Horizontal extent
        height: Vertical extent
    """

    x: float
    y: float
    width: float
    height: float

    def contains(self, p: Point) -> bool:
        """Check whether a point lies inside the rectangle, edges included."""
        return (
            self.x <= p.x <= self.x + self.width
            and self.y <= p.y <= self.y + self.height
        )

    @classmethod
    def enclosing(cls, points: list[Point]) -> "Rect":
        """Smallest rectangle containing all points.

        Args:
            points: Points to enclose

        Returns:
            Enclosing rectangle, zero-sized at the origin when ``points`` is empty
        """
        if not points:
            return cls(0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        min_x, min_y = min(xs), min(ys)
        return cls(min_x, min_y, max(xs) - min_x, max(ys) - min_y)

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary form, used for structured log fields."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}
