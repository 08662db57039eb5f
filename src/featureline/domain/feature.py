"""Feature kinds and the editing capability shared by all features.

A feature is a linear map object (road, river, railroad) whose shape is a
compound Bezier curve. Editors only need the index-based control point
capability defined here; drawing attributes are left to the renderer.
"""

from enum import Enum
from typing import Protocol, runtime_checkable

from featureline.domain.point import Point


class FeatureType(str, Enum):
    """Kind of linear feature."""

    ROAD = "road"
    RIVER = "river"
    RAILROAD = "railroad"


class CenterLine(str, Enum):
    """Centerline marking drawn along a road."""

    SOLID = "solid"
    DOUBLE_SOLID = "double_solid"
    STRIPE = "stripe"


@runtime_checkable
class Feature(Protocol):
    """Index-based control point access used for hit-testing and dragging."""

    def ctrl_points(self) -> int:
        """Get the control point count of the feature."""
        ...

    def ctrl_point(self, idx: int) -> Point | None:
        """Get a single control point, or None if there is no such index."""
        ...

    def set_ctrl_point(self, idx: int, point: Point) -> None:
        """Move a control point to ``point``."""
        ...
