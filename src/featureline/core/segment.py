"""Single cubic Bezier segment with a cached tessellation."""

import logging
from collections.abc import Sequence

from featureline.core.geometry import (
    cubic_point,
    sample_count,
    sample_parameters,
    validate_resolution,
)
from featureline.domain import Point
from featureline.exceptions import ControlPointIndexError, InvalidParameterError

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 0.025

DEFAULT_CTRL_POINTS: tuple[Point, Point, Point, Point] = (
    Point(20.0, 20.0),
    Point(120.0, 20.0),
    Point(220.0, 220.0),
    Point(320.0, 20.0),
)


class CubicCurveSegment:
    """A cubic Bezier curve defined by 4 control points.

    The segment is sampled at a fixed step in the curve parameter. The sampled
    polyline is cached and recomputed lazily: every mutation marks the segment
    dirty, and the next call to ``curve()`` rebuilds the cache.

    Besides the dirty flag, each mutation bumps ``revision``. Owners that
    derive their own caches from the segment (edge polylines) compare
    revisions, since reading ``curve()`` clears the dirty flag.

    Attributes:
        revision: Counter incremented on every mutation
    """

    def __init__(
        self,
        points: Sequence[Point] | None = None,
        resolution: float = DEFAULT_RESOLUTION,
    ) -> None:
        """Create a segment.

        Args:
            points: Exactly 4 control points (default shape if None)
            resolution: Step in ``t`` between samples, in ``(0, 1]``

        Raises:
            InvalidParameterError: If the resolution is out of range or the
                number of control points is not 4
        """
        ctrl = DEFAULT_CTRL_POINTS if points is None else tuple(points)
        if len(ctrl) != 4:
            raise InvalidParameterError(
                "control points", len(ctrl), "a cubic segment needs exactly 4"
            )

        self._resolution = validate_resolution(resolution)
        self._ctrl: list[Point] = list(ctrl)
        self._curve: list[Point] = []
        self._dirty = True
        self.revision = 0

    def __repr__(self) -> str:
        pts = ", ".join(f"({p.x:g}, {p.y:g})" for p in self._ctrl)
        return f"CubicCurveSegment([{pts}], resolution={self._resolution:g})"

    @property
    def resolution(self) -> float:
        """Step in curve parameter ``t`` between samples."""
        return self._resolution

    def set_resolution(self, resolution: float) -> None:
        """Replace the sampling step.

        Raises:
            InvalidParameterError: If resolution is not in ``(0, 1]``
        """
        self._resolution = validate_resolution(resolution)
        self._touch()

    def ctrl_point(self, idx: int) -> Point:
        """Get one control point.

        Args:
            idx: Local index 0..3

        Returns:
            The control point

        Raises:
            ControlPointIndexError: If idx is not in 0..3
        """
        if not 0 <= idx < 4:
            raise ControlPointIndexError(idx, 4)
        return self._ctrl[idx]

    def ctrl_points(self) -> tuple[Point, Point, Point, Point]:
        """All four control points in order."""
        p0, p1, p2, p3 = self._ctrl
        return (p0, p1, p2, p3)

    def set_ctrl_point(self, idx: int, point: Point) -> None:
        """Overwrite a control point and mark the segment dirty.

        Raises:
            ControlPointIndexError: If idx is not in 0..3
        """
        if not 0 <= idx < 4:
            raise ControlPointIndexError(idx, 4)
        self._ctrl[idx] = point
        self._touch()

    def is_modified(self) -> bool:
        """Whether the cached tessellation is stale."""
        return self._dirty

    def sample_count(self) -> int:
        """Number of points ``curve()`` returns."""
        return sample_count(self._resolution)

    def parameters(self) -> list[float]:
        """Curve parameters of the samples, last one exactly 1.0."""
        return sample_parameters(self._resolution)

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter ``t``."""
        return cubic_point(self.ctrl_points(), t)

    def curve(self) -> list[Point]:
        """Tessellated polyline of the segment.

        Recomputed only when the segment is dirty. The first point equals P0
        and the last point equals P3 exactly.

        Returns:
            List of ``sample_count()`` points
        """
        if self._dirty:
            ctrl = self.ctrl_points()
            self._curve = [cubic_point(ctrl, t) for t in self.parameters()]
            self._dirty = False
            logger.debug("Segment tessellated: %d samples", len(self._curve))
        return self._curve

    def _touch(self) -> None:
        self._dirty = True
        self.revision += 1
