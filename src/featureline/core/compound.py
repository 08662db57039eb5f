"""Compound Bezier curve: a chain of tangent-continuous cubic segments.

The chain is stored as a list of independent segments. Neighboring segments
each hold their own copy of the anchor they share, and every edit made
through the compound curve is written through to the neighbor so that:

- ``segment[i].P3 == segment[i+1].P0`` (shared anchor)
- ``segment[i+1].P1 == segment[i].P2.reflect(anchor)`` (tangent continuity)

Control points are addressed by a global index ``g``, which maps to segment
``g // 4`` and local index ``g % 4``.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from featureline.core.segment import DEFAULT_RESOLUTION, CubicCurveSegment
from featureline.core.surface import assemble_surface, edge_curves, tangent_points
from featureline.domain import CenterLine, FeatureType, Point, Rect
from featureline.exceptions import ControlPointIndexError, InvalidParameterError

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 50.0


@dataclass
class EdgeCache:
    """Offset edges of one segment and the state they were built from."""

    segment: CubicCurveSegment
    revision: int
    width: float
    left: list[Point]
    right: list[Point]


class CompoundCurve:
    """An ordered, non-empty chain of cubic segments edited as one curve.

    Subclasses describing concrete features override the class-level
    ``feature_type`` and the defaults used when width or edge line visibility
    are not given.

    Attributes:
        centerline: Optional centerline marking style
        edgeline_visible: Whether the renderer should stroke the edge lines
    """

    feature_type: FeatureType | None = None
    default_width: float = DEFAULT_WIDTH
    default_edgeline_visible: bool = False

    def __init__(
        self,
        points: Sequence[Point] | None = None,
        resolution: float = DEFAULT_RESOLUTION,
        width: float | None = None,
        centerline: CenterLine | None = None,
        edgeline_visible: bool | None = None,
    ) -> None:
        """Create a compound curve with a single segment.

        Args:
            points: 4 control points of the first segment (default shape if None)
            resolution: Sampling step shared by all segments
            width: Surface band width (class default if None)
            centerline: Centerline marking style
            edgeline_visible: Whether edge lines are drawn (class default if None)

        Raises:
            InvalidParameterError: On invalid resolution, width or point count
        """
        self._width = _validate_width(self.default_width if width is None else width)
        self._segments: list[CubicCurveSegment] = [CubicCurveSegment(points, resolution)]
        self._edges: list[EdgeCache | None] = [None]
        self._modified = True
        self.centerline = centerline
        self.edgeline_visible = (
            self.default_edgeline_visible if edgeline_visible is None else edgeline_visible
        )

    @classmethod
    def with_attributes(
        cls,
        width: float,
        centerline: CenterLine | None = None,
        edgeline_visible: bool | None = None,
    ) -> "CompoundCurve":
        """Create a default-shaped curve with the given display attributes."""
        return cls(width=width, centerline=centerline, edgeline_visible=edgeline_visible)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(segments={len(self._segments)}, "
            f"resolution={self.resolution:g}, width={self._width:g})"
        )

    # Structure

    def segments(self) -> tuple[CubicCurveSegment, ...]:
        """The segments in chain order."""
        return tuple(self._segments)

    def mut_segments(self) -> list[CubicCurveSegment]:
        """The live segment list.

        Edits made directly on a segment bypass continuity propagation.
        """
        return self._segments

    def add_segment(self, p2: Point, p3: Point) -> CubicCurveSegment:
        """Append a segment that continues the chain smoothly.

        The new segment starts at the last anchor, and its first handle is the
        mirror of the last segment's outgoing handle around that anchor.

        Args:
            p2: Second handle of the new segment
            p3: End anchor of the new segment

        Returns:
            The appended segment
        """
        last = self._segments[-1]
        anchor = last.ctrl_point(3)
        handle_in = last.ctrl_point(2)
        segment = CubicCurveSegment(
            [anchor, handle_in.reflect(anchor), p2, p3], last.resolution
        )
        self._segments.append(segment)
        self._edges.append(None)
        self._modified = True
        logger.debug("Segment added: %d segments", len(self._segments))
        return segment

    # Feature capability

    def ctrl_points(self) -> int:
        """Number of addressable control points, 4 per segment."""
        return 4 * len(self._segments)

    def ctrl_point(self, idx: int) -> Point | None:
        """Get a control point by global index.

        Returns:
            The point, or None when the index addresses no segment
        """
        if idx < 0:
            return None
        seg_idx, local = divmod(idx, 4)
        if seg_idx >= len(self._segments):
            return None
        return self._segments[seg_idx].ctrl_point(local)

    def set_ctrl_point(self, idx: int, point: Point) -> None:
        """Move a control point and keep the chain consistent.

        Anchors shared by two segments are written to both. Moving a shared
        anchor carries both adjoining handles along by the same displacement,
        which keeps them mirrored around the new anchor position.
        Moving a handle next to a joint mirrors it into the neighbor's handle
        around the joint anchor. The two ends of the whole chain have no
        neighbor and are written alone.

        Args:
            idx: Global control point index
            point: New position

        Raises:
            ControlPointIndexError: If idx addresses no control point
        """
        count = self.ctrl_points()
        if not 0 <= idx < count:
            raise ControlPointIndexError(idx, count)

        seg_idx, local = divmod(idx, 4)
        segment = self._segments[seg_idx]
        last_idx = len(self._segments) - 1

        if local == 0 and seg_idx > 0:
            self._move_anchor(seg_idx - 1, point)
        elif local == 3 and seg_idx < last_idx:
            self._move_anchor(seg_idx, point)
        elif local == 1 and seg_idx > 0:
            segment.set_ctrl_point(1, point)
            prev = self._segments[seg_idx - 1]
            prev.set_ctrl_point(2, point.reflect(segment.ctrl_point(0)))
        elif local == 2 and seg_idx < last_idx:
            segment.set_ctrl_point(2, point)
            nxt = self._segments[seg_idx + 1]
            nxt.set_ctrl_point(1, point.reflect(segment.ctrl_point(3)))
        else:
            segment.set_ctrl_point(local, point)

    def _move_anchor(self, joint: int, point: Point) -> None:
        """Move the anchor between segments ``joint`` and ``joint + 1``."""
        before = self._segments[joint]
        after = self._segments[joint + 1]
        delta = point - before.ctrl_point(3)

        before.set_ctrl_point(2, before.ctrl_point(2) + delta)
        before.set_ctrl_point(3, point)
        after.set_ctrl_point(0, point)
        after.set_ctrl_point(1, after.ctrl_point(1) + delta)

    # Attributes

    @property
    def resolution(self) -> float:
        """Sampling step shared by all segments."""
        return self._segments[0].resolution

    def set_resolution(self, resolution: float) -> None:
        """Change the sampling step of every segment.

        Raises:
            InvalidParameterError: If resolution is not in ``(0, 1]``
        """
        for segment in self._segments:
            segment.set_resolution(resolution)
        self._modified = True

    @property
    def width(self) -> float:
        """Surface band width."""
        return self._width

    def set_width(self, width: float) -> None:
        """Change the surface band width.

        Raises:
            InvalidParameterError: If width is negative
        """
        self._width = _validate_width(width)
        self._modified = True

    def modified(self) -> bool:
        """Whether the surface needs to be rebuilt.

        True after a structural or attribute change not yet followed by
        ``surface()``, or when any segment or edge cache is stale.
        """
        if self._modified:
            return True
        if any(segment.is_modified() for segment in self._segments):
            return True
        self._sync_edges()
        return any(self._edge_stale(i) for i in range(len(self._segments)))

    is_modified = modified

    # Geometry

    def curve(self) -> list[Point]:
        """Tessellated centerline of the whole chain.

        Segment polylines are concatenated, dropping the first point of every
        segment after the first since it repeats the previous end point.
        """
        points = list(self._segments[0].curve())
        for segment in self._segments[1:]:
            points.extend(segment.curve()[1:])
        return points

    def calc_edge_curve(self, segment_idx: int) -> tuple[list[Point], list[Point]]:
        """Compute and cache the left and right edges of one segment.

        Args:
            segment_idx: Index of the segment in the chain

        Returns:
            Tuple of (left edge, right edge) in centerline order
        """
        segment = self._segments[segment_idx]
        self._sync_edges()
        left, right = edge_curves(segment.curve(), tangent_points(segment), self._width)
        self._edges[segment_idx] = EdgeCache(
            segment, segment.revision, self._width, left, right
        )
        logger.debug("Edge curves rebuilt for segment %d", segment_idx)
        return left, right

    def edge_lines(self) -> tuple[list[Point], list[Point]]:
        """Left and right edge lines of the whole chain, in centerline order."""
        lefts, rights = self._edge_polylines()
        return (
            [p for left in lefts for p in left],
            [p for right in rights for p in right],
        )

    def surface(self) -> list[Point]:
        """Fill polygon of the feature surface.

        Stale segment edges are rebuilt first. The outline holds twice as many
        points as there are centerline samples across all segments and is not
        explicitly closed.
        """
        lefts, rights = self._edge_polylines()
        self._modified = False
        return assemble_surface(lefts, rights)

    def bounds(self) -> Rect:
        """Rectangle enclosing the centerline and the surface."""
        return Rect.enclosing(self.curve() + self.surface())

    def _edge_polylines(self) -> tuple[list[list[Point]], list[list[Point]]]:
        self._sync_edges()
        lefts: list[list[Point]] = []
        rights: list[list[Point]] = []
        for i in range(len(self._segments)):
            cache = self._edges[i]
            if cache is None or self._edge_stale(i):
                left, right = self.calc_edge_curve(i)
            else:
                left, right = cache.left, cache.right
            lefts.append(left)
            rights.append(right)
        return lefts, rights

    def _sync_edges(self) -> None:
        # Segments appended through mut_segments() have no cache slot yet.
        missing = len(self._segments) - len(self._edges)
        if missing > 0:
            self._edges.extend([None] * missing)
        elif missing < 0:
            del self._edges[len(self._segments):]

    def _edge_stale(self, segment_idx: int) -> bool:
        cache = self._edges[segment_idx]
        return (
            cache is None
            or cache.segment is not self._segments[segment_idx]
            or cache.revision != self._segments[segment_idx].revision
            or cache.width != self._width
        )


def _validate_width(width: float) -> float:
    if not width >= 0.0:
        raise InvalidParameterError("width", width, "must be zero or positive")
    return float(width)
